"""Turns raw suggestion-source results into selectable completion items."""

from __future__ import annotations

from typing import List, Optional

from script_completion.buffer import Replacer
from script_completion.runtime import telemetry

from .models import CandidateToken, CompletionItem, ExpressionInfo
from .source import SuggestionSource


class SuggestionAdapter:
    """Queries the source once per build and binds items to the replacer.

    Each item captures the replace range computed for the build that created
    it; accepting the item replaces exactly that range, never the live caret.
    """

    def __init__(
        self,
        source: SuggestionSource,
        replacer: Replacer,
        *,
        logger_name: Optional[str] = None,
    ) -> None:
        self.source = source
        self.replacer = replacer
        self._logger_name = logger_name

    def build(self, text: Optional[str], caret: int) -> List[CompletionItem]:
        current = text or ""
        with telemetry.span(
            "completion::build",
            logger_name=self._logger_name,
            component="completion",
            metadata={"caret": caret},
        ) as handle:
            result = self.source.get_suggestions_for_expression(current, caret)
            if not result.candidates:
                handle.add_metadata("items", 0)
                return []
            token = result.token
            token.replace_range.validate(current, caret)
            items = [self._to_item(info, token) for info in result.candidates]
            handle.add_metadata("items", len(items))
            return items

    def _to_item(self, info: ExpressionInfo, token: CandidateToken) -> CompletionItem:
        return CompletionItem(
            label=info.name,
            insert_text=info.name,
            replace_range=token.replace_range,
            description=info.description,
            kind=info.kind,
            token=token.text,
            on_insert=self._on_insertion,
        )

    def _on_insertion(self, inserted: str, offset: int, length: int) -> int:
        return self.replacer.replace(offset, length, inserted)


__all__ = ["SuggestionAdapter"]
