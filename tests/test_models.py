"""Tests for Pydantic data models."""

import pytest
from structlog.testing import capture_logs

from ai_verify.models.checklist import (
    ChecklistItem,
    ChecklistSection,
    ChecklistState,
    ScoringInput,
)
from ai_verify.models.report import AssessmentReport
from ai_verify.models.result import (
    NEUTRAL_MESSAGE,
    ResultDisplay,
    ScorerView,
    ScoringResult,
    SeverityBand,
)


# ────────────────────────────── Checklist Models ─────────────────────────────


class TestChecklistItem:
    def test_fifteen_items(self):
        assert len(ChecklistItem) == 15

    def test_declaration_order(self):
        items = list(ChecklistItem)
        assert items[0] == ChecklistItem.DOSE_PRESENT
        assert items[-1] == ChecklistItem.CULTURALLY_SENSITIVE

    def test_enum_from_string(self):
        assert ChecklistItem("no-absolute-language") == ChecklistItem.NO_ABSOLUTE_LANGUAGE


class TestChecklistSection:
    def test_values(self):
        assert [s.value for s in ChecklistSection] == [
            "Medicine details",
            "Safety",
            "Evidence & context",
            "Communication",
        ]


class TestChecklistState:
    def test_default_is_all_unticked(self):
        state = ChecklistState()
        assert len(state.ticks) == 15
        assert not any(state.ticks.values())

    def test_all_ticked(self):
        state = ChecklistState.all_ticked()
        assert all(state.ticks.values())
        assert state.unticked() == []

    def test_partial_mapping_fills_missing_as_unticked(self):
        state = ChecklistState(ticks={ChecklistItem.DOSE_PRESENT: True})
        assert len(state.ticks) == 15
        assert state.is_ticked(ChecklistItem.DOSE_PRESENT)
        assert not state.is_ticked(ChecklistItem.ROUTE_PRESENT)

    def test_string_keys_accepted(self):
        state = ChecklistState(ticks={"route-present": True})
        assert state.is_ticked(ChecklistItem.ROUTE_PRESENT)

    def test_unknown_keys_dropped(self):
        with capture_logs() as logs:
            state = ChecklistState(ticks={"made-up": True, "dose-present": True})
        assert len(state.ticks) == 15
        assert state.is_ticked(ChecklistItem.DOSE_PRESENT)

        warnings = [e for e in logs if e["event"] == "Unknown checklist item ignored"]
        assert len(warnings) == 1
        assert warnings[0]["log_level"] == "warning"
        assert warnings[0]["item"] == "made-up"

    def test_known_keys_log_nothing(self):
        with capture_logs() as logs:
            ChecklistState(ticks={"dose-present": True})
        assert logs == []

    def test_values_coerced_to_bool(self):
        state = ChecklistState(ticks={"dose-present": 1, "route-present": 0})
        assert state.ticks[ChecklistItem.DOSE_PRESENT] is True
        assert state.ticks[ChecklistItem.ROUTE_PRESENT] is False

    def test_unticked_in_declaration_order(self):
        state = ChecklistState.from_ticked(
            [i for i in ChecklistItem if i not in (ChecklistItem.SOURCES_PROVIDED, ChecklistItem.ROUTE_PRESENT)]
        )
        assert state.unticked() == [ChecklistItem.ROUTE_PRESENT, ChecklistItem.SOURCES_PROVIDED]

    def test_with_tick_returns_copy(self):
        state = ChecklistState.all_unticked()
        changed = state.with_tick(ChecklistItem.DOSE_PRESENT)
        assert changed.is_ticked(ChecklistItem.DOSE_PRESENT)
        assert not state.is_ticked(ChecklistItem.DOSE_PRESENT)


class TestScoringInput:
    def test_empty(self):
        si = ScoringInput.empty()
        assert si.text == ""
        assert si.checklist.unticked() == list(ChecklistItem)


# ────────────────────────────── Result Models ────────────────────────────────


def _result(**overrides) -> ScoringResult:
    data = {
        "score": 3,
        "band": SeverityBand.GREEN,
        "css_class": "good",
        "message": "Low risk",
    }
    data.update(overrides)
    return ScoringResult(**data)


class TestSeverityBand:
    def test_values(self):
        assert SeverityBand.GREEN == "Green"
        assert SeverityBand.AMBER == "Amber"
        assert SeverityBand.RED == "Red"


class TestScoringResult:
    def test_label_and_score_text(self):
        r = _result()
        assert r.label == "Green"
        assert r.score_text == "Score: 3"
        assert r.actions == ()

    def test_frozen(self):
        r = _result()
        with pytest.raises(Exception):
            r.score = 10

    def test_negative_score_rejected(self):
        with pytest.raises(Exception):
            _result(score=-1)

    def test_too_many_actions_rejected(self):
        with pytest.raises(Exception):
            _result(actions=tuple(f"a{i}" for i in range(7)))


class TestResultDisplay:
    def test_neutral(self):
        d = ResultDisplay.neutral()
        assert d.label == "—"
        assert d.score_text == "Score: —"
        assert d.message == NEUTRAL_MESSAGE
        assert d.css_class == "neutral"
        assert d.actions == []
        assert not d.is_scored

    def test_from_green_result_is_not_neutral(self):
        d = ResultDisplay.from_result(_result(actions=("Do this.",)))
        assert d.label == "Green"
        assert d.css_class == "good"
        assert d.actions == ["Do this."]
        assert d.is_scored


class TestScorerView:
    def test_defaults(self):
        view = ScorerView()
        assert view.scoring_input.text == ""
        assert not view.display.is_scored


# ────────────────────────────── Report Models ────────────────────────────────


class TestAssessmentReport:
    def test_auto_fields(self):
        report = AssessmentReport(result=_result(), summary="s")
        assert report.report_id
        assert report.generated_at
        assert report.text_length == 0
