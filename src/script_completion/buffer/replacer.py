"""Applies accepted completions to a host buffer."""

from __future__ import annotations

from script_completion.runtime import telemetry

from .sync import HostBuffer
from .validation import ensure_range


class Replacer:
    """Replace ``length`` characters at ``offset`` and report the new caret.

    Out-of-range requests raise ``InvalidRangeError`` and leave the buffer
    untouched; a stale range is never clamped.
    """

    def __init__(self, buffer: HostBuffer, *, logger_name: str | None = None) -> None:
        self.buffer = buffer
        self._logger_name = logger_name

    def replace(self, offset: int, length: int, new_text: str) -> int:
        with telemetry.span(
            "replacer::replace",
            logger_name=self._logger_name,
            component="replacer",
            metadata={"offset": offset, "length": length},
        ) as handle:
            ensure_range(self.buffer.text, offset, length)
            self.buffer.replace_range(offset, length, new_text, label="completion")
            caret = offset + len(new_text)
            handle.add_metadata("caret", caret)
            return caret


__all__ = ["Replacer"]
