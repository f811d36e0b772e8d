"""Editor sessions: dirty tracking, naming, and lifecycle gating."""

from .dirty import DirtyTracker, content_hash
from .events import (
    EDITOR_ENABLED,
    EDITOR_IDENTITY,
    SCRIPT_STATE,
    SCRIPT_UPDATED,
    EditorIdentity,
    ScriptStateChanged,
)
from .naming import FilenamePolicy, UntitledCounter, untitled_counter
from .session import EditingDisabledError, ScriptEditorSession

__all__ = [
    "DirtyTracker",
    "EDITOR_ENABLED",
    "EDITOR_IDENTITY",
    "EditingDisabledError",
    "EditorIdentity",
    "FilenamePolicy",
    "SCRIPT_STATE",
    "SCRIPT_UPDATED",
    "ScriptEditorSession",
    "ScriptStateChanged",
    "UntitledCounter",
    "content_hash",
    "untitled_counter",
]
