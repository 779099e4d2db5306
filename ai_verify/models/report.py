"""Pydantic model for an exported assessment."""

from __future__ import annotations

import uuid
from datetime import datetime, timezone

from pydantic import BaseModel, Field

from ai_verify.models.result import ScoringResult


class AssessmentReport(BaseModel):
    """Shareable record of one scoring run."""

    report_id: str = Field(default_factory=lambda: uuid.uuid4().hex)
    generated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    result: ScoringResult
    summary: str
    text_length: int = 0
