"""Script editor session wiring buffer, completion, and dirty tracking."""

from __future__ import annotations

from typing import Optional

from script_completion.buffer import Replacer, ScriptBuffer
from script_completion.completion import (
    CompletionSession,
    EventBus,
    SessionState,
    SuggestionAdapter,
    SuggestionSource,
)
from script_completion.runtime import EngineSettings, load_settings, telemetry

from .dirty import DirtyTracker
from .events import (
    EDITOR_ENABLED,
    EDITOR_IDENTITY,
    SCRIPT_STATE,
    SCRIPT_UPDATED,
    EditorIdentity,
    ScriptStateChanged,
)
from .naming import FilenamePolicy, UntitledCounter


class EditingDisabledError(RuntimeError):
    """Raised when an edit is attempted while a script is running."""


class ScriptEditorSession:
    """One open script: its text, caret, popup session, and file identity."""

    def __init__(
        self,
        source: SuggestionSource,
        *,
        file_path: Optional[str] = None,
        bus: Optional[EventBus] = None,
        settings: Optional[EngineSettings] = None,
        counter: Optional[UntitledCounter] = None,
        logger_name: Optional[str] = None,
    ) -> None:
        self.settings = settings or load_settings()
        self.bus = bus or EventBus()
        self.naming = FilenamePolicy(file_path, counter=counter, settings=self.settings)
        self.buffer = ScriptBuffer(name=self.naming.content_id)
        self.replacer = Replacer(self.buffer, logger_name=logger_name)
        self.adapter = SuggestionAdapter(source, self.replacer, logger_name=logger_name)
        self.completion = CompletionSession(
            self.adapter, source, bus=self.bus, logger_name=logger_name
        )
        self.dirty = DirtyTracker(empty_is_dirty=self.settings.empty_is_dirty)
        self._enabled = True
        self.bus.subscribe(SCRIPT_STATE, self._on_script_state)
        self.completion.refresh(self.buffer.text, self.buffer.caret)

    # -- text and caret -------------------------------------------------

    @property
    def script(self) -> str:
        return self.buffer.text

    @script.setter
    def script(self, value: str) -> None:
        self.buffer.set_text(value)
        self.completion.on_caret_moved(self.buffer.text, self.buffer.caret)
        self.bus.emit(SCRIPT_UPDATED, value)

    @property
    def caret(self) -> int:
        return self.buffer.caret

    @caret.setter
    def caret(self, value: int) -> None:
        if value == self.buffer.caret:
            return
        self.move_caret(value)

    def move_caret(self, offset: int) -> SessionState:
        """Navigate without typing; may close the popup on stepping out."""

        self.buffer.move_caret(offset)
        return self.completion.on_caret_moved(self.buffer.text, self.buffer.caret)

    def type_char(self, char: str) -> SessionState:
        """Run the pre-insertion triggers, insert ``char``, then advance."""

        if len(char) != 1:
            raise ValueError(f"type_char expects a single character, got {char!r}")
        self._require_enabled()
        self.completion.before_write(self.buffer.text, self.buffer.caret, char)
        self.buffer.insert_text(char)
        state = self.completion.on_caret_moved(
            self.buffer.text, self.buffer.caret, typing=True
        )
        self.bus.emit(SCRIPT_UPDATED, self.buffer.text)
        return state

    def commit_selected(self) -> int:
        self._require_enabled()
        caret = self.completion.commit_selected()
        self.bus.emit(SCRIPT_UPDATED, self.buffer.text)
        return caret

    @property
    def state(self) -> SessionState:
        return self.completion.state

    # -- load / save ----------------------------------------------------

    def load_file_content(self, content: str) -> None:
        self.buffer.set_text(content, caret=0)
        self.dirty.load(content)
        self.completion.on_caret_moved(self.buffer.text, self.buffer.caret)

    def saved(self) -> None:
        self.dirty.mark_saved(self.buffer.text)

    @property
    def is_dirty(self) -> bool:
        return self.dirty.is_dirty(self.buffer.text)

    @property
    def is_file_content(self) -> bool:
        return True

    @property
    def file_content(self) -> str:
        return self.script

    # -- identity -------------------------------------------------------

    @property
    def file_path(self) -> Optional[str]:
        return self.naming.file_path

    @file_path.setter
    def file_path(self, value: Optional[str]) -> None:
        self.naming.file_path = value
        self.bus.emit(EDITOR_IDENTITY, self.identity())

    @property
    def filename(self) -> str:
        return self.naming.filename

    @property
    def title(self) -> str:
        return self.naming.title

    @property
    def tooltip(self) -> str:
        return self.naming.tooltip

    @property
    def content_id(self) -> str:
        return self.naming.content_id

    def identity(self) -> EditorIdentity:
        return EditorIdentity(
            filename=self.filename,
            title=self.title,
            tooltip=self.tooltip,
            content_id=self.content_id,
        )

    # -- script lifecycle -----------------------------------------------

    @property
    def enabled(self) -> bool:
        return self._enabled

    def handle_script_state(self, running: bool) -> None:
        self._enabled = not running
        telemetry.record_event(
            "script.lifecycle",
            data={"running": running, "editor": self.content_id},
        )
        self.bus.emit(EDITOR_ENABLED, self._enabled)

    def _on_script_state(self, payload: object) -> None:
        if isinstance(payload, ScriptStateChanged):
            self.handle_script_state(payload.running)

    def _require_enabled(self) -> None:
        if not self._enabled:
            raise EditingDisabledError("Editing is disabled while a script is running")


__all__ = ["EditingDisabledError", "ScriptEditorSession"]
