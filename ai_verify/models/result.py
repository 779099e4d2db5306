"""Pydantic models for scoring results and what the result box renders."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from ai_verify.models.checklist import ChecklistItem, ScoringInput

NEUTRAL_LABEL = "—"
NEUTRAL_CLASS = "neutral"
NEUTRAL_MESSAGE = "Tick the checklist and click “Score risk”."
MAX_ACTIONS = 6


class SeverityBand(str, Enum):
    GREEN = "Green"
    AMBER = "Amber"
    RED = "Red"


class ScoringResult(BaseModel):
    """Outcome of one scoring invocation. Immutable."""

    model_config = ConfigDict(frozen=True)

    score: int = Field(ge=0)
    band: SeverityBand
    css_class: str
    message: str
    actions: tuple[str, ...] = Field(default=(), max_length=MAX_ACTIONS)
    missing: tuple[ChecklistItem, ...] = ()
    absolute_terms: tuple[str, ...] = ()

    @property
    def label(self) -> str:
        return self.band.value

    @property
    def score_text(self) -> str:
        return f"Score: {self.score}"


class ResultDisplay(BaseModel):
    """Render state of the result box, scored or not."""

    label: str
    score_text: str
    message: str
    css_class: str
    actions: list[str] = Field(default_factory=list)

    @property
    def is_scored(self) -> bool:
        return self.css_class != NEUTRAL_CLASS

    @classmethod
    def neutral(cls) -> ResultDisplay:
        """Placeholder shown before anything has been scored."""
        return cls(
            label=NEUTRAL_LABEL,
            score_text=f"Score: {NEUTRAL_LABEL}",
            message=NEUTRAL_MESSAGE,
            css_class=NEUTRAL_CLASS,
        )

    @classmethod
    def from_result(cls, result: ScoringResult) -> ResultDisplay:
        return cls(
            label=result.label,
            score_text=result.score_text,
            message=result.message,
            css_class=result.css_class,
            actions=list(result.actions),
        )


class ScorerView(BaseModel):
    """Scoring input together with the result box it currently shows."""

    scoring_input: ScoringInput = Field(default_factory=ScoringInput.empty)
    display: ResultDisplay = Field(default_factory=ResultDisplay.neutral)
