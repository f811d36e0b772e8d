from __future__ import annotations

from typing import List, Optional

import pytest

from script_completion.completion import (
    EventBus,
    NamespaceSuggestionSource,
    SessionClosedError,
    SessionStatus,
)
from script_completion.editor import (
    EDITOR_ENABLED,
    EDITOR_IDENTITY,
    SCRIPT_STATE,
    SCRIPT_UPDATED,
    EditingDisabledError,
    EditorIdentity,
    ScriptEditorSession,
    ScriptStateChanged,
    UntitledCounter,
)
from script_completion.runtime import EngineSettings

from fakes import NAMESPACE


def make_editor(
    *,
    file_path: Optional[str] = None,
    bus: Optional[EventBus] = None,
    counter: Optional[UntitledCounter] = None,
) -> ScriptEditorSession:
    return ScriptEditorSession(
        NamespaceSuggestionSource(NAMESPACE),
        file_path=file_path,
        bus=bus,
        settings=EngineSettings(),
        counter=counter or UntitledCounter(),
    )


def type_text(editor: ScriptEditorSession, text: str) -> None:
    for char in text:
        editor.type_char(char)


def labels(editor: ScriptEditorSession) -> List[str]:
    return [item.label for item in editor.state.items]


def test_new_editor_starts_closed_and_dirty() -> None:
    editor = make_editor()

    assert editor.state.status is SessionStatus.CLOSED
    assert editor.script == ""
    assert editor.is_dirty is True
    assert editor.is_file_content is True
    assert editor.title == "Untitled.py"


def test_typing_member_access_opens_popup() -> None:
    editor = make_editor()

    type_text(editor, "keyboard.")

    assert editor.state.is_open
    assert labels(editor) == ["getKeyDown", "getPressed", "setKeyDown"]
    assert editor.state.selected_index == 0
    assert editor.caret == 9


def test_typing_narrows_candidates() -> None:
    editor = make_editor()

    type_text(editor, "keyboard.g")

    assert labels(editor) == ["getKeyDown", "getPressed"]


def test_commit_applies_completion_over_typed_prefix() -> None:
    editor = make_editor()
    type_text(editor, "keyboard.ge")
    editor.completion.select_next()

    caret = editor.commit_selected()

    assert editor.script == "keyboard.getPressed"
    assert caret == editor.caret == 19
    assert editor.state.status is SessionStatus.CLOSED


def test_delimiter_closes_popup() -> None:
    editor = make_editor()
    type_text(editor, "mouse.")
    assert editor.state.is_open

    editor.type_char("(")

    assert editor.state.status is SessionStatus.CLOSED
    assert editor.state.items == ()
    assert editor.script == "mouse.("


def test_navigation_out_of_expression_closes() -> None:
    editor = make_editor()
    editor.script = "keyboard.getKeyDown"

    assert editor.move_caret(9).is_open
    assert editor.move_caret(12).status is SessionStatus.CLOSED


def test_loading_content_closes_stale_popup() -> None:
    editor = make_editor()
    type_text(editor, "mouse.d")
    assert editor.state.is_open

    editor.load_file_content("print('hello world')")

    assert editor.state.status is SessionStatus.CLOSED
    with pytest.raises(SessionClosedError):
        editor.commit_selected()
    assert editor.script == "print('hello world')"
    assert editor.caret == 0


def test_assigning_script_refreshes_popup() -> None:
    editor = make_editor()
    type_text(editor, "mouse.d")
    assert editor.state.is_open

    editor.script = "print('hello world')"

    assert editor.caret == 7
    assert editor.state.status is SessionStatus.CLOSED
    with pytest.raises(SessionClosedError):
        editor.commit_selected()
    assert editor.script == "print('hello world')"


def test_caret_setter_ignores_unchanged_position() -> None:
    editor = make_editor()
    editor.script = "mouse."
    editor.caret = 6
    assert editor.state.is_open
    editor.completion.close()

    editor.caret = 6

    assert editor.state.status is SessionStatus.CLOSED


def test_type_char_requires_single_character() -> None:
    with pytest.raises(ValueError):
        make_editor().type_char("ab")


def test_dirty_round_trip() -> None:
    editor = make_editor()
    editor.load_file_content("mouse.deltaX")
    editor.saved()

    assert editor.is_dirty is False
    assert editor.caret == 0

    editor.caret = len(editor.script)
    editor.type_char("2")
    assert editor.is_dirty is True


def test_loading_empty_content_is_dirty() -> None:
    editor = make_editor()

    editor.load_file_content("")

    assert editor.is_dirty is True


def test_script_updates_are_published() -> None:
    bus = EventBus()
    updates: List[object] = []
    bus.subscribe(SCRIPT_UPDATED, updates.append)
    editor = make_editor(bus=bus)

    editor.script = "m"
    editor.caret = 1
    editor.type_char("o")
    editor.load_file_content("ignored by subscribers")

    assert updates == ["m", "mo"]


def test_running_script_disables_editing() -> None:
    bus = EventBus()
    enabled: List[object] = []
    bus.subscribe(EDITOR_ENABLED, enabled.append)
    editor = make_editor(bus=bus)

    bus.emit(SCRIPT_STATE, ScriptStateChanged(running=True))

    assert editor.enabled is False
    with pytest.raises(EditingDisabledError):
        editor.type_char("k")
    assert editor.script == ""

    bus.emit(SCRIPT_STATE, ScriptStateChanged(running=False))
    editor.type_char("k")

    assert enabled == [False, True]
    assert editor.script == "k"


def test_completion_still_tracks_caret_while_disabled() -> None:
    editor = make_editor()
    editor.script = "mouse."
    editor.handle_script_state(True)

    assert editor.move_caret(6).is_open


def test_file_path_changes_identity() -> None:
    bus = EventBus()
    identities: List[object] = []
    bus.subscribe(EDITOR_IDENTITY, identities.append)
    counter = UntitledCounter()
    editor = make_editor(bus=bus, counter=counter)
    second = make_editor(counter=counter)

    editor.file_path = "/scripts/flight.py"

    assert second.filename == "Untitled-1.py"
    assert identities == [
        EditorIdentity(
            filename="flight.py",
            title="flight.py",
            tooltip="/scripts/flight.py",
            content_id="/scripts/flight.py",
        )
    ]
    assert editor.content_id == "/scripts/flight.py"
