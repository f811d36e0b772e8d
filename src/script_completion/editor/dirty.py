"""Content-hash dirty tracking."""

from __future__ import annotations

import hashlib
from typing import Optional

from script_completion.runtime import telemetry


def content_hash(text: str) -> str:
    return hashlib.sha1(text.encode("utf-8")).hexdigest()


class DirtyTracker:
    """Compares the current text against the hash taken at the last load/save.

    With ``empty_is_dirty`` an empty buffer always reports dirty, even right
    after loading or saving empty content, so blank new scripts are always
    offered for saving.
    """

    def __init__(self, *, empty_is_dirty: bool = True) -> None:
        self.empty_is_dirty = empty_is_dirty
        self._baseline: Optional[str] = None

    @property
    def baseline(self) -> Optional[str]:
        return self._baseline

    def load(self, content: str) -> None:
        self._reset(content, reason="load")

    def mark_saved(self, content: str) -> None:
        self._reset(content, reason="save")

    def is_dirty(self, content: str) -> bool:
        if content == "" and self.empty_is_dirty:
            return True
        return content_hash(content) != self._baseline

    def _reset(self, content: str, *, reason: str) -> None:
        self._baseline = content_hash(content)
        telemetry.record_event(
            "script.baseline",
            level="debug",
            data={"reason": reason, "length": len(content)},
        )


__all__ = ["DirtyTracker", "content_hash"]
