"""Fixed scoring tables: weights, remediation actions, labels, thresholds.

Every table is keyed by ``ChecklistItem``. ``verify_tables()`` runs on import
so an item added to the enum without a weight, action, label or section fails
loudly instead of falling back to defaults at scoring time.
"""

from __future__ import annotations

from typing import Mapping

from ai_verify.models.checklist import ChecklistItem, ChecklistSection
from ai_verify.models.result import MAX_ACTIONS, SeverityBand


class IncompleteTableError(ValueError):
    """A scoring table does not cover every checklist item."""


# ── Weights (risk points added when an item is NOT ticked) ────────────────────

DEFAULT_WEIGHT = 1

CHECKLIST_WEIGHTS: dict[ChecklistItem, int] = {
    ChecklistItem.DOSE_PRESENT: 2,
    ChecklistItem.ROUTE_PRESENT: 1,
    ChecklistItem.FREQUENCY_PRESENT: 2,
    ChecklistItem.DURATION_PRESENT: 1,
    ChecklistItem.CONTRAINDICATIONS_PRESENT: 2,
    ChecklistItem.INTERACTIONS_PRESENT: 2,
    ChecklistItem.MONITORING_PRESENT: 1,
    ChecklistItem.RED_FLAGS_PRESENT: 1,
    ChecklistItem.PATIENT_FACTORS_CONSIDERED: 2,
    ChecklistItem.SOURCES_PROVIDED: 2,
    ChecklistItem.SOURCES_VERIFIABLE: 2,
    ChecklistItem.UNCERTAINTY_FLAGGED: 1,
    ChecklistItem.NO_ABSOLUTE_LANGUAGE: 1,
    ChecklistItem.PLAIN_LANGUAGE: 1,
    ChecklistItem.CULTURALLY_SENSITIVE: 1,
}

# ── Remediation actions ──────────────────────────────────────────────────────

REMEDIATION_ACTIONS: dict[ChecklistItem, str] = {
    ChecklistItem.DOSE_PRESENT: "Verify the dose/strength in a trusted source (e.g., BNF/local guidance).",
    ChecklistItem.ROUTE_PRESENT: "Confirm route/formulation and ensure the advice matches the product.",
    ChecklistItem.FREQUENCY_PRESENT: "Check frequency/maximum usage advice (avoid unsafe overuse).",
    ChecklistItem.DURATION_PRESENT: "Clarify duration/stop criteria where relevant.",
    ChecklistItem.CONTRAINDICATIONS_PRESENT: "Check contraindications/cautions for the patient’s comorbidities.",
    ChecklistItem.INTERACTIONS_PRESENT: "Check for clinically significant drug–drug interactions.",
    ChecklistItem.MONITORING_PRESENT: "Confirm monitoring requirements (labs/response) where relevant.",
    ChecklistItem.RED_FLAGS_PRESENT: "Add safety-netting and clear red flags for urgent review.",
    ChecklistItem.PATIENT_FACTORS_CONSIDERED: (
        "Consider patient factors (renal/hepatic, pregnancy, age, asthma control, etc.)."
    ),
    ChecklistItem.SOURCES_PROVIDED: "Require sources; avoid using uncited outputs for clinical decisions.",
    ChecklistItem.SOURCES_VERIFIABLE: "Verify citations are real and up-to-date (avoid fabricated references).",
    ChecklistItem.UNCERTAINTY_FLAGGED: "Look for uncertainty; if missing, assume it may be incomplete and verify.",
    ChecklistItem.NO_ABSOLUTE_LANGUAGE: "Be cautious of absolute claims; verify and contextualise.",
    ChecklistItem.PLAIN_LANGUAGE: "Rephrase into clear patient-friendly counselling.",
    ChecklistItem.CULTURALLY_SENSITIVE: "Adapt counselling for health literacy, language needs, and beliefs.",
}

# ── Form labels / sections ───────────────────────────────────────────────────

CHECKLIST_LABELS: dict[ChecklistItem, str] = {
    ChecklistItem.DOSE_PRESENT: "Dose / strength is stated",
    ChecklistItem.ROUTE_PRESENT: "Route / formulation is stated",
    ChecklistItem.FREQUENCY_PRESENT: "Frequency and maximum usage are stated",
    ChecklistItem.DURATION_PRESENT: "Duration or stop criteria are stated",
    ChecklistItem.CONTRAINDICATIONS_PRESENT: "Contraindications / cautions are covered",
    ChecklistItem.INTERACTIONS_PRESENT: "Drug interactions are covered",
    ChecklistItem.MONITORING_PRESENT: "Monitoring requirements are covered",
    ChecklistItem.RED_FLAGS_PRESENT: "Red flags / safety-netting are included",
    ChecklistItem.PATIENT_FACTORS_CONSIDERED: "Patient factors are considered",
    ChecklistItem.SOURCES_PROVIDED: "Sources are provided",
    ChecklistItem.SOURCES_VERIFIABLE: "Sources are real and verifiable",
    ChecklistItem.UNCERTAINTY_FLAGGED: "Uncertainty or limitations are flagged",
    ChecklistItem.NO_ABSOLUTE_LANGUAGE: "No absolute language (always / never / guaranteed)",
    ChecklistItem.PLAIN_LANGUAGE: "Plain, patient-friendly language",
    ChecklistItem.CULTURALLY_SENSITIVE: "Culturally sensitive and accessible",
}

CHECKLIST_SECTIONS: dict[ChecklistItem, ChecklistSection] = {
    ChecklistItem.DOSE_PRESENT: ChecklistSection.MEDICINE_DETAILS,
    ChecklistItem.ROUTE_PRESENT: ChecklistSection.MEDICINE_DETAILS,
    ChecklistItem.FREQUENCY_PRESENT: ChecklistSection.MEDICINE_DETAILS,
    ChecklistItem.DURATION_PRESENT: ChecklistSection.MEDICINE_DETAILS,
    ChecklistItem.CONTRAINDICATIONS_PRESENT: ChecklistSection.SAFETY,
    ChecklistItem.INTERACTIONS_PRESENT: ChecklistSection.SAFETY,
    ChecklistItem.MONITORING_PRESENT: ChecklistSection.SAFETY,
    ChecklistItem.RED_FLAGS_PRESENT: ChecklistSection.SAFETY,
    ChecklistItem.PATIENT_FACTORS_CONSIDERED: ChecklistSection.EVIDENCE,
    ChecklistItem.SOURCES_PROVIDED: ChecklistSection.EVIDENCE,
    ChecklistItem.SOURCES_VERIFIABLE: ChecklistSection.EVIDENCE,
    ChecklistItem.UNCERTAINTY_FLAGGED: ChecklistSection.EVIDENCE,
    ChecklistItem.NO_ABSOLUTE_LANGUAGE: ChecklistSection.COMMUNICATION,
    ChecklistItem.PLAIN_LANGUAGE: ChecklistSection.COMMUNICATION,
    ChecklistItem.CULTURALLY_SENSITIVE: ChecklistSection.COMMUNICATION,
}

# ── Absolute-language heuristic ──────────────────────────────────────────────

ABSOLUTE_WORDS: tuple[str, ...] = (
    "always",
    "never",
    "guarantee",
    "guaranteed",
    "definitely",
    "certainly",
    "must",
)
ABSOLUTE_LANGUAGE_PENALTY = 1

# ── Severity bands ───────────────────────────────────────────────────────────

GREEN_MAX_SCORE = 8
AMBER_MAX_SCORE = 15

BAND_CLASSES: dict[SeverityBand, str] = {
    SeverityBand.GREEN: "good",
    SeverityBand.AMBER: "warn",
    SeverityBand.RED: "bad",
}

BAND_MESSAGES: dict[SeverityBand, str] = {
    SeverityBand.GREEN: "Low risk based on checklist. Still verify key clinical details in trusted sources.",
    SeverityBand.AMBER: "Moderate risk. Verify key details before relying on this information.",
    SeverityBand.RED: (
        "High risk. Do not rely on this without thorough verification and professional judgement."
    ),
}

# ── Summary ──────────────────────────────────────────────────────────────────

SUMMARY_PREFIX = "AI-VERIFY Result"
SNIPPET_LENGTH = 240
ELLIPSIS = "…"


# ── Completeness check ───────────────────────────────────────────────────────


def _missing_keys(table: Mapping, keys: list) -> list[str]:
    return [str(getattr(k, "value", k)) for k in keys if k not in table]


def verify_tables(
    weights: Mapping[ChecklistItem, int] = CHECKLIST_WEIGHTS,
    actions: Mapping[ChecklistItem, str] = REMEDIATION_ACTIONS,
    labels: Mapping[ChecklistItem, str] = CHECKLIST_LABELS,
    sections: Mapping[ChecklistItem, ChecklistSection] = CHECKLIST_SECTIONS,
) -> None:
    """Raise ``IncompleteTableError`` unless every table covers every item."""
    items = list(ChecklistItem)
    problems: list[str] = []

    for name, table in (
        ("weights", weights),
        ("actions", actions),
        ("labels", labels),
        ("sections", sections),
    ):
        missing = _missing_keys(table, items)
        if missing:
            problems.append(f"{name} missing {', '.join(missing)}")

    bad_weights = [
        item.value
        for item, weight in weights.items()
        if not isinstance(weight, int) or isinstance(weight, bool) or weight < 1
    ]
    if bad_weights:
        problems.append(f"non-positive weights for {', '.join(bad_weights)}")

    bands = list(SeverityBand)
    for name, table in (("band classes", BAND_CLASSES), ("band messages", BAND_MESSAGES)):
        missing = _missing_keys(table, bands)
        if missing:
            problems.append(f"{name} missing {', '.join(missing)}")

    if problems:
        raise IncompleteTableError("; ".join(problems))


verify_tables()
