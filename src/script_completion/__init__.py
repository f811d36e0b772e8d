"""Completion trigger and text replacement engine for script editors."""

__all__ = [
    "adapters",
    "buffer",
    "completion",
    "editor",
    "runtime",
]

__version__ = "0.1.0"
