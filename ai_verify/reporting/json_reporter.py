"""JSON export — serializes a scored assessment for sharing."""

from __future__ import annotations

import json
from pathlib import Path

from ai_verify.config import Settings, get_settings
from ai_verify.logger import get_logger
from ai_verify.models.checklist import ScoringInput
from ai_verify.models.report import AssessmentReport
from ai_verify.scoring.risk_scorer import score_input, summarize

logger = get_logger(__name__)


def build_report(scoring_input: ScoringInput) -> AssessmentReport:
    """Score ``scoring_input`` and wrap the result with its one-line summary.

    Result, summary and text length are all derived from the same input.
    """
    result = score_input(scoring_input)
    return AssessmentReport(
        result=result,
        summary=summarize(result, scoring_input.text),
        text_length=len(scoring_input.text),
    )


def render_json_report(report: AssessmentReport) -> str:
    return json.dumps(report.model_dump(mode="json"), indent=2, ensure_ascii=False)


def save_json_report(report: AssessmentReport, output_dir: str | Path) -> Path:
    """Serialize and save the assessment as JSON.

    Returns the path to the saved file.
    """
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    path = output_dir / f"assessment_{report.report_id}.json"
    with open(path, "w", encoding="utf-8") as f:
        f.write(render_json_report(report))

    logger.info("JSON assessment saved", path=str(path), band=report.result.band.value)
    return path


def export_report(report: AssessmentReport, settings: Settings | None = None) -> Path:
    """Save ``report`` under the configured report directory."""
    settings = settings or get_settings()
    settings.ensure_dirs()
    return save_json_report(report, settings.report_dir)
