"""Boundary types shared between the buffer and its host."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol


@dataclass(frozen=True, slots=True)
class BufferMirror:
    """Host-friendly snapshot of the buffer."""

    text: str
    caret: int
    version: int
    attributes: dict[str, str] = field(default_factory=dict)


class HostBuffer(Protocol):
    """What the completion core needs from whoever owns the text."""

    @property
    def text(self) -> str:
        ...

    @property
    def caret(self) -> int:
        ...

    def replace_range(
        self, offset: int, length: int, text: str, *, label: str
    ) -> object:
        """Replace ``length`` characters at ``offset`` with ``text`` in one step."""
        ...


class BufferValidationError(RuntimeError):
    """Raised when a caret or range does not fit the current buffer."""

    def __init__(self, message: str, *, position: int | None = None) -> None:
        super().__init__(message)
        self.position = position
