"""Script buffer, range validation, and the replacer."""

from .buffer import BufferChange, ScriptBuffer, Transaction
from .replacer import Replacer
from .sync import BufferMirror, BufferValidationError, HostBuffer
from .validation import InvalidRangeError, ensure_caret, ensure_range

__all__ = [
    "BufferChange",
    "BufferMirror",
    "BufferValidationError",
    "HostBuffer",
    "InvalidRangeError",
    "Replacer",
    "ScriptBuffer",
    "Transaction",
    "ensure_caret",
    "ensure_range",
]
