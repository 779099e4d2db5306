"""Risk scorer — weighted checklist sum plus an absolute-language text heuristic."""

from __future__ import annotations

from typing import Iterable, Mapping

from ai_verify.logger import get_logger
from ai_verify.models.checklist import ChecklistItem, ChecklistState, ScoringInput
from ai_verify.models.result import (
    NEUTRAL_LABEL,
    ResultDisplay,
    ScorerView,
    ScoringResult,
    SeverityBand,
)
from ai_verify.scoring.tables import (
    ABSOLUTE_LANGUAGE_PENALTY,
    ABSOLUTE_WORDS,
    AMBER_MAX_SCORE,
    BAND_CLASSES,
    BAND_MESSAGES,
    CHECKLIST_WEIGHTS,
    DEFAULT_WEIGHT,
    ELLIPSIS,
    GREEN_MAX_SCORE,
    MAX_ACTIONS,
    REMEDIATION_ACTIONS,
    SNIPPET_LENGTH,
    SUMMARY_PREFIX,
)

logger = get_logger(__name__)


def band_for_score(score: int) -> SeverityBand:
    """Map a numeric score onto the Green / Amber / Red thresholds."""
    if score <= GREEN_MAX_SCORE:
        return SeverityBand.GREEN
    if score <= AMBER_MAX_SCORE:
        return SeverityBand.AMBER
    return SeverityBand.RED


def find_absolute_language(text: str) -> list[str]:
    """Trigger words found in ``text`` (case-insensitive substring match)."""
    lowered = (text or "").lower()
    return [word for word in ABSOLUTE_WORDS if word in lowered]


def build_actions(missing: Iterable[ChecklistItem]) -> list[str]:
    """Turn missing items into remediation actions.

    Duplicates are dropped keeping first occurrence, items without an action
    are skipped, and the list is capped at ``MAX_ACTIONS``.
    """
    unique = dict.fromkeys(missing)
    actions = [REMEDIATION_ACTIONS[item] for item in unique if item in REMEDIATION_ACTIONS]
    return actions[:MAX_ACTIONS]


def score(
    checklist: ChecklistState | Mapping[ChecklistItem | str, bool],
    text: str = "",
) -> ScoringResult:
    """Score one checklist + pasted text. Pure; never raises for well-typed input."""
    if not isinstance(checklist, ChecklistState):
        checklist = ChecklistState(ticks=checklist)

    total = 0
    missing: list[ChecklistItem] = []

    for item in ChecklistItem:
        if not checklist.is_ticked(item):
            total += CHECKLIST_WEIGHTS.get(item, DEFAULT_WEIGHT)
            missing.append(item)

    absolute_terms = find_absolute_language(text)
    if absolute_terms:
        total += ABSOLUTE_LANGUAGE_PENALTY
        if ChecklistItem.NO_ABSOLUTE_LANGUAGE not in missing:
            missing.append(ChecklistItem.NO_ABSOLUTE_LANGUAGE)

    band = band_for_score(total)
    result = ScoringResult(
        score=total,
        band=band,
        css_class=BAND_CLASSES[band],
        message=BAND_MESSAGES[band],
        actions=tuple(build_actions(missing)),
        missing=tuple(dict.fromkeys(missing)),
        absolute_terms=tuple(absolute_terms),
    )

    logger.debug(
        "Risk scored",
        score=result.score,
        band=result.band.value,
        missing=len(result.missing),
        absolute_terms=list(result.absolute_terms),
    )
    return result


def score_input(scoring_input: ScoringInput) -> ScoringResult:
    return score(scoring_input.checklist, scoring_input.text)


def summarize(result: ScoringResult | None, text: str) -> str:
    """One-line shareable summary: label, score and a 240-character snippet.

    ``result=None`` renders the unscored placeholder.
    """
    if result is None:
        label, score_text = NEUTRAL_LABEL, f"Score: {NEUTRAL_LABEL}"
    else:
        label, score_text = result.label, result.score_text

    collapsed = " ".join((text or "").split())
    snippet = collapsed[:SNIPPET_LENGTH]
    suffix = ELLIPSIS if len(collapsed) > SNIPPET_LENGTH else ""

    return f'{SUMMARY_PREFIX}: {label} ({score_text}). Snippet: "{snippet}{suffix}"'


def reset() -> ScorerView:
    """Empty input (nothing ticked, no text) with the neutral result box."""
    return ScorerView(scoring_input=ScoringInput.empty(), display=ResultDisplay.neutral())
