from __future__ import annotations

import pytest

from legal_workspace.client import session as s
from legal_workspace.schemas import AnalysisResult, ChatMessage


@pytest.fixture
def analysis(analysis_payload) -> AnalysisResult:
    return AnalysisResult.model_validate(analysis_payload)


def _with_analysis(analysis: AnalysisResult) -> s.SessionState:
    state = s.analysis_started(s.SessionState(), "Case Description: X")
    return s.analysis_succeeded(state, analysis)


def test_new_analysis_clears_transcript_and_document(analysis) -> None:
    state = _with_analysis(analysis)
    state = s.chat_started(state, "What is the punishment?")
    state = s.chat_delta(state, "Life imprisonment.", state.generation)
    state = s.open_document(state)
    assert state.show_document is True

    state = s.analysis_started(state, "Case Description: Y")

    assert state.messages == ()
    assert state.show_document is False
    assert state.analysis is None
    assert state.case_context == "Case Description: Y"
    assert state.is_analyzing is True


def test_analysis_failure_clears_stale_result(analysis) -> None:
    state = s.analysis_started(_with_analysis(analysis), "Case Description: Y")
    state = s.analysis_failed(state)
    assert state.analysis is None
    assert state.is_analyzing is False


def test_delta_appends_then_replaces_last_assistant_message(analysis) -> None:
    state = s.chat_started(_with_analysis(analysis), "Is bail possible?")
    gen = state.generation

    state = s.chat_delta(state, "Bail", gen)
    assert state.messages[-1] == ChatMessage(role="assistant", content="Bail")
    assert len(state.messages) == 2

    earlier = state.messages[0]
    state = s.chat_delta(state, "Bail is discretionary.", gen)
    assert len(state.messages) == 2
    assert state.messages[0] is earlier
    assert state.messages[-1].content == "Bail is discretionary."


def test_second_question_starts_a_new_assistant_message(analysis) -> None:
    state = s.chat_started(_with_analysis(analysis), "Q1")
    state = s.chat_delta(state, "A1", state.generation)
    state = s.chat_finished(state, state.generation)
    state = s.chat_started(state, "Q2")
    state = s.chat_delta(state, "A2", state.generation)
    assert [(m.role, m.content) for m in state.messages] == [
        ("user", "Q1"),
        ("assistant", "A1"),
        ("user", "Q2"),
        ("assistant", "A2"),
    ]


def test_empty_delta_leaves_state_untouched(analysis) -> None:
    state = s.chat_started(_with_analysis(analysis), "Q")
    assert s.chat_delta(state, "", state.generation) is state


def test_stale_generation_is_ignored(analysis) -> None:
    state = s.chat_started(_with_analysis(analysis), "Q")
    old_gen = state.generation

    state = s.analysis_started(state, "Case Description: Y")
    assert s.chat_delta(state, "late reply", old_gen) is state
    assert s.chat_finished(state, old_gen) is state


def test_document_cannot_open_without_analysis() -> None:
    state = s.open_document(s.SessionState())
    assert state.show_document is False
