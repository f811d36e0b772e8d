"""Flat-text script buffer with a caret and atomic range replacement."""

from __future__ import annotations

from contextlib import AbstractContextManager
from dataclasses import dataclass
from typing import Callable, ContextManager, List, Optional

from script_completion.runtime import telemetry

from .sync import BufferMirror
from .validation import ensure_caret, ensure_range

BufferObserver = Callable[["BufferChange"], None]


@dataclass(frozen=True, slots=True)
class BufferChange:
    version: int
    text: str
    caret: int
    label: str
    offset: int
    removed: str
    inserted: str


class ScriptBuffer:
    """Owns the script text and caret offset.

    Offsets are 0-based character positions into ``text``. Every mutation
    bumps ``version`` and notifies subscribers once, after the new text and
    caret are both in place.
    """

    def __init__(self, text: str = "", *, caret: int = 0, name: str = "script") -> None:
        self.name = name
        self._text = text
        self._caret = ensure_caret(text, caret)
        self.version = 0
        self._observers: List[BufferObserver] = []

    @property
    def text(self) -> str:
        return self._text

    @property
    def caret(self) -> int:
        return self._caret

    def subscribe(self, observer: BufferObserver) -> None:
        self._observers.append(observer)

    def mirror(self, *, attributes: Optional[dict[str, str]] = None) -> BufferMirror:
        return BufferMirror(
            text=self._text,
            caret=self._caret,
            version=self.version,
            attributes=dict(attributes or {}),
        )

    def move_caret(self, caret: int) -> int:
        self._caret = ensure_caret(self._text, caret)
        return self._caret

    def set_text(self, text: str, *, caret: Optional[int] = None) -> BufferChange:
        """Swap the whole text, as for an external edit or a file load."""

        target = min(self._caret if caret is None else caret, len(text))
        return self._apply(0, len(self._text), text, max(target, 0), label="set_text")

    def insert_text(self, text: str) -> BufferChange:
        return self.replace_range(self._caret, 0, text, label="insert_text")

    def replace_range(
        self, offset: int, length: int, text: str, *, label: str = "replace_range"
    ) -> BufferChange:
        ensure_range(self._text, offset, length)
        return self._apply(offset, length, text, offset + len(text), label=label)

    def _apply(
        self, offset: int, length: int, text: str, caret: int, *, label: str
    ) -> BufferChange:
        with Transaction(self, label):
            removed = self._text[offset : offset + length]
            self._text = self._text[:offset] + text + self._text[offset + length :]
            self._caret = caret
            self.version += 1
            change = BufferChange(
                version=self.version,
                text=self._text,
                caret=self._caret,
                label=label,
                offset=offset,
                removed=removed,
                inserted=text,
            )
        for observer in list(self._observers):
            observer(change)
        return change


class Transaction(AbstractContextManager["Transaction"]):
    def __init__(self, buffer: ScriptBuffer, label: str) -> None:
        self.buffer = buffer
        self.label = label
        self._span_cm: Optional[ContextManager[object]] = None

    def __enter__(self) -> "Transaction":
        self._span_cm = telemetry.span(
            name=f"buffer::{self.label}",
            component=True,
            metadata={"buffer": self.buffer.name, "version": self.buffer.version},
        )
        self._span_cm.__enter__()
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        if self._span_cm is not None:
            self._span_cm.__exit__(exc_type, exc, tb)
        return False
