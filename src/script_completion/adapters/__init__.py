"""Host-facing adapters."""

from .popup import PopupAdapter, PopupUIHooks

__all__ = ["PopupAdapter", "PopupUIHooks"]
