"""
Session state for one workspace user and the transitions that change it.

Every transition is a pure function returning a new ``SessionState``; the
controller is the only place that swaps the current state for the next one.

``generation`` increases each time an analysis starts. A chat reply carries
the generation it was sent under, and deltas or completion from an older
generation are ignored, so a reply still streaming when the user starts a
new analysis cannot leak into the fresh transcript.
"""

from __future__ import annotations

from dataclasses import dataclass, replace

from ..schemas import AnalysisResult, ChatMessage


@dataclass(frozen=True)
class SessionState:
    analysis: AnalysisResult | None = None
    case_context: str = ""
    messages: tuple[ChatMessage, ...] = ()
    is_analyzing: bool = False
    is_chat_loading: bool = False
    show_document: bool = False
    generation: int = 0


# ----------------------------------------------------------------------
# Analysis
# ----------------------------------------------------------------------


def analysis_started(state: SessionState, case_context: str) -> SessionState:
    return replace(
        state,
        analysis=None,
        case_context=case_context,
        messages=(),
        is_analyzing=True,
        is_chat_loading=False,
        show_document=False,
        generation=state.generation + 1,
    )


def analysis_succeeded(state: SessionState, analysis: AnalysisResult) -> SessionState:
    return replace(state, analysis=analysis, is_analyzing=False)


def analysis_failed(state: SessionState) -> SessionState:
    return replace(state, analysis=None, is_analyzing=False)


# ----------------------------------------------------------------------
# Chat
# ----------------------------------------------------------------------


def chat_started(state: SessionState, user_text: str) -> SessionState:
    return replace(
        state,
        messages=(*state.messages, ChatMessage(role="user", content=user_text)),
        is_chat_loading=True,
    )


def chat_delta(state: SessionState, accumulated: str, generation: int) -> SessionState:
    """Show the assistant reply accumulated so far.

    Replaces the last message when it is already the assistant's, otherwise
    appends a new assistant message.
    """
    if not accumulated or generation != state.generation:
        return state

    reply = ChatMessage(role="assistant", content=accumulated)
    if state.messages and state.messages[-1].role == "assistant":
        return replace(state, messages=(*state.messages[:-1], reply))
    return replace(state, messages=(*state.messages, reply))


def chat_finished(state: SessionState, generation: int) -> SessionState:
    if generation != state.generation:
        return state
    return replace(state, is_chat_loading=False)


# ----------------------------------------------------------------------
# Document view
# ----------------------------------------------------------------------


def open_document(state: SessionState) -> SessionState:
    if state.analysis is None:
        return state
    return replace(state, show_document=True)


def close_document(state: SessionState) -> SessionState:
    return replace(state, show_document=False)
