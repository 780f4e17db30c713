from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from ..errors import WorkspaceError
from ..ui.export import render_print_html
from . import session as transitions
from .requestor import (
    GatewayClient,
    build_case_prompt,
    build_context_message,
)
from .session import SessionState
from .stream_decoder import decode_stream

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Notification:
    title: str
    description: str
    variant: str = "default"


class WorkspaceController:
    """Owns one user's session state and runs the user-triggered operations.

    No error escapes ``submit_analysis`` or ``send_chat_message``; failures
    are passed to ``notify`` instead.
    """

    def __init__(
        self,
        client: GatewayClient,
        notify: Callable[[Notification], None] | None = None,
        on_change: Callable[[SessionState], None] | None = None,
    ) -> None:
        self.client = client
        self.state = SessionState()
        self.notify = notify
        self.on_change = on_change

    def _apply(self, new_state: SessionState) -> None:
        if new_state is self.state:
            return
        self.state = new_state
        if self.on_change is not None:
            self.on_change(new_state)

    def _report(self, title: str, description: str) -> None:
        if self.notify is not None:
            self.notify(Notification(title, description, variant="destructive"))

    # ------------------------------------------------------------------
    # Analysis
    # ------------------------------------------------------------------

    def submit_analysis(self, description: str, category: str = "", offence: str = "") -> bool:
        """Run a new case analysis. Returns False when nothing was sent."""
        if not description.strip() or self.state.is_analyzing:
            return False

        prompt = build_case_prompt(description, category, offence)
        self._apply(transitions.analysis_started(self.state, prompt))

        try:
            result = self.client.analyze(prompt)
        except WorkspaceError as exc:
            logger.exception("Case analysis failed")
            self._apply(transitions.analysis_failed(self.state))
            title = "Analysis Error" if exc.title == WorkspaceError.title else exc.title
            self._report(title, exc.message)
            return True
        except Exception:
            logger.exception("Case analysis failed unexpectedly")
            self._apply(transitions.analysis_failed(self.state))
            self._report("Analysis Error", "Failed to analyze case")
            return True

        self._apply(transitions.analysis_succeeded(self.state, result))
        return True

    # ------------------------------------------------------------------
    # Chat
    # ------------------------------------------------------------------

    def send_chat_message(self, text: str) -> bool:
        """Send a follow-up question and stream the reply into the transcript."""
        text = text.strip()
        state = self.state
        if not text or state.analysis is None or state.is_chat_loading:
            return False

        context = build_context_message(state.case_context, state.analysis)
        self._apply(transitions.chat_started(state, text))
        generation = self.state.generation
        conversation = [context, *self.state.messages]

        def on_delta(accumulated: str) -> None:
            self._apply(transitions.chat_delta(self.state, accumulated, generation))

        try:
            decode_stream(self.client.stream_chat(conversation), on_delta)
        except WorkspaceError as exc:
            logger.exception("Chat request failed")
            self._report("Chat Error", exc.message)
        except Exception:
            logger.exception("Chat request failed unexpectedly")
            self._report("Chat Error", "Failed to get response")
        finally:
            self._apply(transitions.chat_finished(self.state, generation))
        return True

    # ------------------------------------------------------------------
    # Document
    # ------------------------------------------------------------------

    def open_document(self) -> None:
        self._apply(transitions.open_document(self.state))

    def close_document(self) -> None:
        self._apply(transitions.close_document(self.state))

    def export_document(self) -> str | None:
        if self.state.analysis is None:
            return None
        return render_print_html(self.state.analysis.courtDocument)
