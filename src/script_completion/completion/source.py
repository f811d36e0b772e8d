"""Contract for the language-aware suggestion source."""

from __future__ import annotations

from typing import Protocol

from .models import SuggestionResult


class SuggestionSource(Protocol):
    """Synchronous, in-process completion provider.

    Queries never fail; a position with nothing to offer returns an empty
    ``SuggestionResult``.
    """

    def get_suggestions_for_expression(self, text: str, caret: int) -> SuggestionResult:
        ...

    def is_beginning_of_expression(self, text: str, caret: int) -> bool:
        ...

    def is_end_of_expression_delimiter(self, char: str) -> bool:
        ...


__all__ = ["SuggestionSource"]
