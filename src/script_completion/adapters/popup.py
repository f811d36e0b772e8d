"""Bridges an editor session to a host's completion popup widgets."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Optional, Sequence

from script_completion.buffer import BufferMirror
from script_completion.completion import CompletionItem, SessionState
from script_completion.completion.session import CLOSED, OPENED, SELECTED
from script_completion.editor import ScriptEditorSession


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


@dataclass(slots=True)
class PopupUIHooks:
    """Callbacks the adapter invokes to update host widgets."""

    show_items: Callable[[Sequence[CompletionItem], int], None]
    hide: Callable[[], None] = _noop
    update_selection: Callable[[int], None] = _noop
    update_buffer: Callable[[BufferMirror], None] = _noop
    log: Callable[[str], None] = _noop


_NAVIGATION = {"left", "right", "home", "end"}


class PopupAdapter:
    """Translates host key names into session calls and relays popup events.

    ``up``/``down`` move the selection and ``enter``/``tab`` commit it, but
    only while the popup is open; otherwise those keys are left to the host.
    While a script is running, editing keys are not consumed.
    """

    def __init__(self, editor: ScriptEditorSession, hooks: PopupUIHooks) -> None:
        self.editor = editor
        self.hooks = hooks
        self._subscribe_events()

    def handle_key(self, key: str, *, text: Optional[str] = None) -> bool:
        self._log_state("key ->", key=key, text=text)
        consumed = self._dispatch(key.lower(), text)
        self.hooks.update_buffer(self.editor.buffer.mirror())
        self._log_state("result <-", consumed=consumed)
        return consumed

    def _dispatch(self, key: str, text: Optional[str]) -> bool:
        is_open = self.editor.state.is_open
        if is_open and key == "down":
            self.editor.completion.select_next()
            return True
        if is_open and key == "up":
            self.editor.completion.select_previous()
            return True
        if is_open and key in {"enter", "tab"}:
            if not self.editor.enabled:
                return False
            self.editor.commit_selected()
            return True
        if key == "escape":
            if not is_open:
                return False
            self.editor.completion.close()
            return True
        if key in _NAVIGATION:
            self.editor.move_caret(self._navigate(key))
            return True
        if text is not None and len(text) == 1 and text.isprintable():
            if not self.editor.enabled:
                return False
            self.editor.type_char(text)
            return True
        return False

    def _navigate(self, key: str) -> int:
        caret = self.editor.caret
        text = self.editor.script
        if key == "left":
            return max(caret - 1, 0)
        if key == "right":
            return min(caret + 1, len(text))
        if key == "home":
            return text.rfind("\n", 0, caret) + 1
        end = text.find("\n", caret)
        return len(text) if end == -1 else end

    def _subscribe_events(self) -> None:
        bus = self.editor.bus
        bus.subscribe(OPENED, self._on_opened)
        bus.subscribe(CLOSED, self._on_closed)
        bus.subscribe(SELECTED, self._on_selected)

    def _on_opened(self, payload: object) -> None:
        if isinstance(payload, SessionState):
            self._log_state("event ->", event=OPENED, items=len(payload.items))
            self.hooks.show_items(payload.items, payload.selected_index or 0)

    def _on_closed(self, payload: object) -> None:
        del payload
        self._log_state("event ->", event=CLOSED)
        self.hooks.hide()

    def _on_selected(self, payload: object) -> None:
        if isinstance(payload, SessionState) and payload.selected_index is not None:
            self.hooks.update_selection(payload.selected_index)

    def _log_state(self, prefix: str, **fields: object) -> None:
        snapshot = self._state_metadata()
        snapshot.update({k: v for k, v in fields.items() if v is not None})
        parts = [prefix] + [f"{key}={value!r}" for key, value in snapshot.items()]
        self.hooks.log(" ".join(parts))

    def _state_metadata(self) -> Dict[str, object]:
        buffer = self.editor.buffer
        return {
            "popup": self.editor.state.status.value,
            "caret": buffer.caret,
            "buffer": buffer.name,
            "buffer_version": buffer.version,
            "enabled": self.editor.enabled,
        }


__all__ = ["PopupAdapter", "PopupUIHooks"]
