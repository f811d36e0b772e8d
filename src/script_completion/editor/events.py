"""Bus event names and payloads published or consumed by editor sessions."""

from __future__ import annotations

from dataclasses import dataclass

SCRIPT_STATE = "script.state"
SCRIPT_UPDATED = "script.updated"
EDITOR_ENABLED = "editor.enabled"
EDITOR_IDENTITY = "editor.identity"


@dataclass(frozen=True, slots=True)
class ScriptStateChanged:
    """Published by the script runner when execution starts or stops."""

    running: bool


@dataclass(frozen=True, slots=True)
class EditorIdentity:
    filename: str
    title: str
    tooltip: str
    content_id: str


__all__ = [
    "EDITOR_ENABLED",
    "EDITOR_IDENTITY",
    "SCRIPT_STATE",
    "SCRIPT_UPDATED",
    "EditorIdentity",
    "ScriptStateChanged",
]
