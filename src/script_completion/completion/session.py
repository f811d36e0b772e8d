"""Open/closed state machine for the completion popup."""

from __future__ import annotations

from typing import Optional

from script_completion.runtime import telemetry

from .adapter import SuggestionAdapter
from .boundary import TriggerPolicy, evaluate_policy
from .bus import EventBus
from .models import SessionState
from .source import SuggestionSource

OPENED = "completion.opened"
CLOSED = "completion.closed"
SELECTED = "completion.selected"


class SessionClosedError(RuntimeError):
    """Raised when committing while no completion is selected."""


class CompletionSession:
    """Drives popup visibility from caret moves and keystrokes.

    Every trigger runs one synchronous refresh whose result replaces the
    previous state outright. Transitions are published on ``bus`` so host
    widgets can render them.
    """

    def __init__(
        self,
        adapter: SuggestionAdapter,
        source: SuggestionSource,
        *,
        bus: Optional[EventBus] = None,
        logger_name: Optional[str] = None,
    ) -> None:
        self.adapter = adapter
        self.source = source
        self.bus = bus or EventBus()
        self._logger_name = logger_name
        self._state = SessionState.closed()
        # Set by a delimiter keystroke so the caret move that completes it
        # cannot reopen the popup.
        self._closed_by_delimiter = False

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def is_open(self) -> bool:
        return self._state.is_open

    def refresh(self, text: Optional[str], caret: int) -> SessionState:
        return self._transition(self._query(text, caret), reason="refresh")

    def on_caret_moved(
        self, text: Optional[str], caret: int, *, typing: bool = False
    ) -> SessionState:
        if typing and self._closed_by_delimiter:
            self._closed_by_delimiter = False
            return self._transition(SessionState.closed(), reason="delimiter")
        self._closed_by_delimiter = False

        state = self._query(text, caret)
        if (
            not typing
            and state.is_open
            and evaluate_policy(
                TriggerPolicy.CLOSE_ON_STEPPING_OUT, self.source, text, caret
            )
        ):
            return self._transition(SessionState.closed(), reason="stepped_out")
        return self._transition(state, reason="caret_moved")

    def before_write(self, text: Optional[str], caret: int, char: str) -> SessionState:
        """Pre-insertion hook, called before ``char`` lands at ``caret``."""

        if evaluate_policy(
            TriggerPolicy.CLOSE_ON_DELIMITER, self.source, text, caret, char
        ):
            self._closed_by_delimiter = True
            return self._transition(SessionState.closed(), reason="delimiter")
        self._closed_by_delimiter = False

        if evaluate_policy(
            TriggerPolicy.OPEN_ON_BEGINNING, self.source, text, caret, char
        ):
            return self._transition(self._query(text, caret), reason="beginning")
        return self._state

    def close(self) -> SessionState:
        return self._transition(SessionState.closed(), reason="close")

    def select(self, index: int) -> SessionState:
        if not self._state.is_open:
            return self._state
        self._state = self._state.with_selection(index)
        self.bus.emit(SELECTED, self._state)
        return self._state

    def select_next(self) -> SessionState:
        current = self._state.selected_index
        return self.select(0 if current is None else current + 1)

    def select_previous(self) -> SessionState:
        current = self._state.selected_index
        return self.select(0 if current is None else current - 1)

    def commit_selected(self) -> int:
        """Insert the selected item and close; returns the new caret offset.

        Replacement errors propagate and leave the session as it was.
        """

        item = self._state.selected
        if not self._state.is_open or item is None:
            raise SessionClosedError("No completion is selected")
        with telemetry.span(
            "completion::commit",
            logger_name=self._logger_name,
            component="completion",
            metadata={"label": item.label},
        ):
            caret = item.insert()
        self._transition(SessionState.closed(), reason="commit")
        return caret

    def _query(self, text: Optional[str], caret: int) -> SessionState:
        return SessionState.opened(tuple(self.adapter.build(text, caret)))

    def _transition(self, state: SessionState, *, reason: str) -> SessionState:
        previous = self._state
        self._state = state
        if state.is_open:
            telemetry.record_event(
                OPENED,
                level="debug",
                data={"reason": reason, "items": len(state.items)},
                logger_name=self._logger_name,
            )
            self.bus.emit(OPENED, state)
        elif previous.is_open:
            telemetry.record_event(
                CLOSED,
                level="debug",
                data={"reason": reason},
                logger_name=self._logger_name,
            )
            self.bus.emit(CLOSED, None)
        return state


__all__ = [
    "CLOSED",
    "OPENED",
    "SELECTED",
    "CompletionSession",
    "SessionClosedError",
]
