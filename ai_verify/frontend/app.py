"""Streamlit frontend for AI-VERIFY — checklist form, text box and result box.

Run with ``streamlit run ai_verify/frontend/app.py``.
"""

import streamlit as st

from ai_verify.config import get_settings
from ai_verify.logger import get_logger, setup_logging
from ai_verify.models.checklist import ChecklistItem, ChecklistSection, ChecklistState, ScoringInput
from ai_verify.models.result import ResultDisplay, ScorerView
from ai_verify.reporting.json_reporter import build_report, export_report, render_json_report
from ai_verify.scoring.risk_scorer import reset, score_input, summarize
from ai_verify.scoring.tables import CHECKLIST_LABELS, CHECKLIST_SECTIONS, CHECKLIST_WEIGHTS

setup_logging()
logger = get_logger(__name__)
settings = get_settings()

# ── Configuration ────────────────────────────────────────────────────────────

TEXT_KEY = "ai_text"

st.set_page_config(
    page_title=settings.page_title,
    page_icon="🩺",
    layout="wide",
)


# ── Session state (caller-owned scoring input) ───────────────────────────────


def _apply_view(view: ScorerView) -> None:
    for item in ChecklistItem:
        st.session_state[item.value] = view.scoring_input.checklist.is_ticked(item)
    st.session_state[TEXT_KEY] = view.scoring_input.text
    st.session_state["display"] = view.display
    st.session_state["result"] = None
    st.session_state["scored_input"] = None
    st.session_state["show_summary"] = False
    st.session_state["saved_path"] = None


def _current_input() -> ScoringInput:
    checklist = ChecklistState(
        ticks={item: st.session_state.get(item.value, False) for item in ChecklistItem}
    )
    return ScoringInput(checklist=checklist, text=st.session_state.get(TEXT_KEY, ""))


def _on_score() -> None:
    scoring_input = _current_input()
    result = score_input(scoring_input)
    st.session_state["scored_input"] = scoring_input
    st.session_state["result"] = result
    st.session_state["saved_path"] = None
    st.session_state["display"] = ResultDisplay.from_result(result)
    logger.info("Checklist scored", score=result.score, band=result.band.value)


def _on_copy() -> None:
    st.session_state["show_summary"] = True


def _on_reset() -> None:
    _apply_view(reset())


def _on_save() -> None:
    scoring_input = st.session_state.get("scored_input")
    if scoring_input is None:
        return
    path = export_report(build_report(scoring_input), settings)
    st.session_state["saved_path"] = str(path)


if "display" not in st.session_state:
    _apply_view(reset())


# ── Sidebar ──────────────────────────────────────────────────────────────────

st.sidebar.title("🩺 AI-VERIFY")
st.sidebar.markdown("**Clinical AI Output Risk Checker**")
st.sidebar.markdown(
    "Tick every criterion the AI output satisfies. Unticked items add risk "
    "points; absolute language in the pasted text adds one more."
)
st.sidebar.caption("Green ≤ 8 · Amber 9–15 · Red ≥ 16")


# ── Input ────────────────────────────────────────────────────────────────────

st.title("Check an AI-generated clinical answer")

st.text_area(
    "Paste the AI output (optional)",
    key=TEXT_KEY,
    height=200,
    placeholder="Paste the AI-generated text here…",
)

columns = st.columns(len(ChecklistSection))
for column, section in zip(columns, ChecklistSection):
    with column:
        st.subheader(section.value)
        for item in ChecklistItem:
            if CHECKLIST_SECTIONS[item] != section:
                continue
            st.checkbox(
                CHECKLIST_LABELS[item],
                key=item.value,
                help=f"Adds {CHECKLIST_WEIGHTS[item]} risk point(s) when unticked.",
            )

col_score, col_copy, col_reset = st.columns(3)
col_score.button("Score risk", type="primary", on_click=_on_score)
col_copy.button("Copy summary", on_click=_on_copy)
col_reset.button("Reset", on_click=_on_reset)


# ── Result box ───────────────────────────────────────────────────────────────

st.markdown("---")

display: ResultDisplay = st.session_state["display"]
banner = {
    "good": st.success,
    "warn": st.warning,
    "bad": st.error,
}.get(display.css_class, st.info)

banner(f"**{display.label}** — {display.score_text}\n\n{display.message}")

if display.actions:
    st.markdown("**Suggested actions**")
    for action in display.actions:
        st.markdown(f"- {action}")

result = st.session_state.get("result")
scored_input: ScoringInput | None = st.session_state.get("scored_input")
if result is not None and result.absolute_terms:
    st.caption("Absolute language found: " + ", ".join(f"“{t}”" for t in result.absolute_terms))

if scored_input is not None and scored_input.text != st.session_state.get(TEXT_KEY, ""):
    st.caption("The text has changed since scoring. Score again to update the result.")

if st.session_state.get("show_summary"):
    summary_text = scored_input.text if scored_input is not None else st.session_state.get(TEXT_KEY, "")
    st.markdown("**Summary** (use the copy icon)")
    st.code(summarize(result, summary_text), language=None)

if scored_input is not None:
    report = build_report(scored_input)
    col_download, col_save = st.columns(2)
    col_download.download_button(
        "📥 Download JSON",
        data=render_json_report(report),
        file_name=f"assessment_{report.report_id}.json",
        mime="application/json",
    )
    col_save.button("💾 Save report", on_click=_on_save)
    if st.session_state.get("saved_path"):
        st.success(f"Report saved to `{st.session_state['saved_path']}`")
