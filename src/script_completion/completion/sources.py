"""In-process suggestion source over a nested namespace of names."""

from __future__ import annotations

import keyword
from typing import Iterable, List, Mapping, Optional, Sequence, Tuple

from .models import ExpressionInfo, ReplaceRange, SuggestionResult

DELIMITERS = frozenset("()[]{},;:=+-*/%<>!&|^~\"'#@")


def _is_identifier_char(char: str) -> bool:
    return char.isalnum() or char == "_"


def _fragment_start(text: str, caret: int) -> int:
    start = caret
    while start > 0 and _is_identifier_char(text[start - 1]):
        start -= 1
    return start


def _member_chain(text: str, fragment_start: int) -> Optional[List[str]]:
    """Names before the fragment in ``a.b.<fragment>``; ``None`` if unparsable."""

    chain: List[str] = []
    position = fragment_start
    while position > 0 and text[position - 1] == ".":
        end = position - 1
        start = _fragment_start(text, end)
        name = text[start:end]
        if not name or name[0].isdigit():
            return None
        chain.append(name)
        position = start
    chain.reverse()
    return chain


class NamespaceSuggestionSource:
    """Completes globals and dotted member access from a nested mapping.

    ``namespace`` maps names to either another mapping (an object with
    members) or a leaf value; string leaves are used as descriptions.
    Candidates keep the mapping's insertion order.
    """

    def __init__(
        self,
        namespace: Mapping[str, object],
        *,
        keywords: Iterable[str] = (),
        delimiters: Iterable[str] = DELIMITERS,
    ) -> None:
        self.namespace = namespace
        self.keywords: Tuple[str, ...] = tuple(keywords)
        self.delimiters = frozenset(delimiters)

    @classmethod
    def with_python_keywords(
        cls, namespace: Mapping[str, object]
    ) -> "NamespaceSuggestionSource":
        return cls(namespace, keywords=keyword.kwlist)

    def is_end_of_expression_delimiter(self, char: str) -> bool:
        return char.isspace() or char in self.delimiters

    def is_beginning_of_expression(self, text: str, caret: int) -> bool:
        if caret <= 0 or caret > len(text):
            return False
        start = _fragment_start(text, caret)
        fragment = text[start:caret]
        if not fragment:
            return text[caret - 1] == "." and _member_chain(text, caret) is not None
        if len(fragment) > 1 or fragment[0].isdigit():
            return False
        return start == 0 or not _is_identifier_char(text[start - 1])

    def get_suggestions_for_expression(self, text: str, caret: int) -> SuggestionResult:
        if caret < 0 or caret > len(text):
            return SuggestionResult.empty(max(0, min(caret, len(text))))

        start = _fragment_start(text, caret)
        prefix = text[start:caret]
        if prefix[:1].isdigit():
            return SuggestionResult.empty(caret)

        chain = _member_chain(text, start)
        if chain is None:
            return SuggestionResult.empty(caret)
        if not chain and not prefix:
            return SuggestionResult.empty(caret)

        scope = self._resolve(chain)
        if scope is None:
            return SuggestionResult.empty(caret)

        candidates = self._candidates(scope, prefix, top_level=not chain)
        return SuggestionResult(
            candidates=candidates,
            active_token=prefix,
            replace_range=ReplaceRange(start, len(prefix)),
        )

    def _resolve(self, chain: Sequence[str]) -> Optional[Mapping[str, object]]:
        scope: object = self.namespace
        for name in chain:
            if not isinstance(scope, Mapping) or name not in scope:
                return None
            scope = scope[name]
        return scope if isinstance(scope, Mapping) else None

    def _candidates(
        self, scope: Mapping[str, object], prefix: str, *, top_level: bool
    ) -> tuple[ExpressionInfo, ...]:
        lowered = prefix.lower()
        found = [
            ExpressionInfo(
                name=name,
                description=value if isinstance(value, str) else "",
                kind=("namespace" if isinstance(value, Mapping) else "member"),
            )
            for name, value in scope.items()
            if name.lower().startswith(lowered)
        ]
        if top_level:
            found.extend(
                ExpressionInfo(name=word, kind="keyword")
                for word in self.keywords
                if word.lower().startswith(lowered) and word not in scope
            )
        return tuple(found)


__all__ = ["DELIMITERS", "NamespaceSuggestionSource"]
