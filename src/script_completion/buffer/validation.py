"""Offset and range checks shared by the buffer and the replacer."""

from __future__ import annotations

from typing import Optional

from .sync import BufferValidationError


class InvalidRangeError(BufferValidationError):
    """A replacement range that does not fit the live text.

    Usually means the text changed between computing the range and using it.
    ``caret`` is set when the range is in bounds but ends ahead of the caret.
    """

    def __init__(
        self, offset: int, length: int, text_length: int, *, caret: Optional[int] = None
    ) -> None:
        if caret is None:
            message = (
                f"Range (offset={offset}, length={length}) outside text of length "
                f"{text_length}"
            )
        else:
            message = (
                f"Range (offset={offset}, length={length}) ends past caret {caret}"
            )
        super().__init__(message, position=offset)
        self.offset = offset
        self.length = length
        self.text_length = text_length
        self.caret = caret


def ensure_caret(text: str, caret: int) -> int:
    if caret < 0 or caret > len(text):
        raise BufferValidationError("Caret out of range", position=caret)
    return caret


def ensure_range(text: str, offset: int, length: int) -> tuple[int, int]:
    if offset < 0 or length < 0 or offset + length > len(text):
        raise InvalidRangeError(offset, length, len(text))
    return offset, length
