"""Display names and identity for script buffers."""

from __future__ import annotations

import ntpath
import posixpath
import threading
from typing import Optional

from script_completion.runtime import EngineSettings, load_settings


class UntitledCounter:
    """Process-wide sequence for untitled buffers; ids are never reused."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._next = 0

    def next_id(self) -> int:
        with self._lock:
            value = self._next
            self._next += 1
            return value

    def reset(self) -> None:
        with self._lock:
            self._next = 0


untitled_counter = UntitledCounter()


def _basename(path: str) -> str:
    return posixpath.basename(ntpath.basename(path))


class FilenamePolicy:
    """Derives ``filename``, ``title``, ``tooltip`` and ``content_id``.

    A buffer without a path takes the next untitled id once, the first time
    it needs one, and keeps it even after a path is assigned.
    """

    def __init__(
        self,
        file_path: Optional[str] = None,
        *,
        counter: Optional[UntitledCounter] = None,
        settings: Optional[EngineSettings] = None,
    ) -> None:
        self.counter = counter or untitled_counter
        self.settings = settings or load_settings()
        self._untitled_id: Optional[int] = None
        self.file_path = file_path
        if not file_path:
            self._untitled_id = self.counter.next_id()

    @property
    def untitled_id(self) -> int:
        if self._untitled_id is None:
            self._untitled_id = self.counter.next_id()
        return self._untitled_id

    @property
    def filename(self) -> str:
        if self.file_path:
            return _basename(self.file_path)
        suffix = f"-{self.untitled_id}" if self.untitled_id > 0 else ""
        return f"{self.settings.untitled_stem}{suffix}{self.settings.script_extension}"

    @property
    def title(self) -> str:
        return self.filename

    @property
    def tooltip(self) -> str:
        return self.file_path or self.filename

    @property
    def content_id(self) -> str:
        return self.file_path or self.filename


__all__ = ["FilenamePolicy", "UntitledCounter", "untitled_counter"]
