"""Pydantic models for the clinical-output checklist and scoring input."""

from __future__ import annotations

from enum import Enum
from typing import Any, Iterable, Mapping

from pydantic import BaseModel, Field, field_validator

from ai_verify.logger import get_logger

logger = get_logger(__name__)


class ChecklistItem(str, Enum):
    """The fixed set of criteria, in declaration (display and scoring) order."""

    DOSE_PRESENT = "dose-present"
    ROUTE_PRESENT = "route-present"
    FREQUENCY_PRESENT = "frequency-present"
    DURATION_PRESENT = "duration-present"
    CONTRAINDICATIONS_PRESENT = "contraindications-present"
    INTERACTIONS_PRESENT = "interactions-present"
    MONITORING_PRESENT = "monitoring-present"
    RED_FLAGS_PRESENT = "red-flags-present"
    PATIENT_FACTORS_CONSIDERED = "patient-factors-considered"
    SOURCES_PROVIDED = "sources-provided"
    SOURCES_VERIFIABLE = "sources-verifiable"
    UNCERTAINTY_FLAGGED = "uncertainty-flagged"
    NO_ABSOLUTE_LANGUAGE = "no-absolute-language"
    PLAIN_LANGUAGE = "plain-language"
    CULTURALLY_SENSITIVE = "culturally-sensitive"


class ChecklistSection(str, Enum):
    MEDICINE_DETAILS = "Medicine details"
    SAFETY = "Safety"
    EVIDENCE = "Evidence & context"
    COMMUNICATION = "Communication"


def _coerce_item(key: Any) -> ChecklistItem | None:
    try:
        return ChecklistItem(key)
    except ValueError:
        return None


class ChecklistState(BaseModel):
    """Ticked/unticked value for every checklist item.

    Always holds all 15 items: anything missing from the input mapping is
    unticked, and unknown keys are dropped.
    """

    ticks: dict[ChecklistItem, bool] = Field(default_factory=dict, validate_default=True)

    @field_validator("ticks", mode="before")
    @classmethod
    def _complete_ticks(cls, value: Mapping[Any, Any] | None) -> dict[ChecklistItem, bool]:
        ticks = {item: False for item in ChecklistItem}
        for key, ticked in (value or {}).items():
            item = _coerce_item(key)
            if item is None:
                logger.warning("Unknown checklist item ignored", item=str(key))
                continue
            ticks[item] = bool(ticked)
        return ticks

    # ── Constructors ─────────────────────────────────────────────

    @classmethod
    def all_unticked(cls) -> ChecklistState:
        return cls()

    @classmethod
    def all_ticked(cls) -> ChecklistState:
        return cls(ticks={item: True for item in ChecklistItem})

    @classmethod
    def from_ticked(cls, items: Iterable[ChecklistItem | str]) -> ChecklistState:
        """Build a state where exactly ``items`` are ticked."""
        return cls(ticks={item: True for item in items})

    # ── Queries ──────────────────────────────────────────────────

    def is_ticked(self, item: ChecklistItem) -> bool:
        return self.ticks.get(item, False)

    def unticked(self) -> list[ChecklistItem]:
        """Unticked items in declaration order."""
        return [item for item in ChecklistItem if not self.is_ticked(item)]

    def with_tick(self, item: ChecklistItem, ticked: bool = True) -> ChecklistState:
        """Return a copy with one item changed."""
        return ChecklistState(ticks={**self.ticks, item: ticked})


class ScoringInput(BaseModel):
    """Everything the scorer reads: checklist state plus the pasted AI output."""

    checklist: ChecklistState = Field(default_factory=ChecklistState)
    text: str = ""

    @classmethod
    def empty(cls) -> ScoringInput:
        """All items unticked, no text."""
        return cls()
