"""Value types passed between the suggestion source, adapter, and session."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Optional

from script_completion.buffer import InvalidRangeError

InsertionCallback = Callable[[str, int, int], int]


@dataclass(frozen=True, slots=True)
class ReplaceRange:
    """Exact span an accepted completion overwrites."""

    offset: int
    length: int

    @property
    def end(self) -> int:
        return self.offset + self.length

    def validate(self, text: str, caret: int) -> "ReplaceRange":
        """Check the range against the text and caret it was computed for.

        A completion never replaces text ahead of the caret.
        """

        if self.offset < 0 or self.length < 0 or self.end > len(text):
            raise InvalidRangeError(self.offset, self.length, len(text))
        if self.end > caret:
            raise InvalidRangeError(
                self.offset, self.length, len(text), caret=caret
            )
        return self


@dataclass(frozen=True, slots=True)
class ExpressionInfo:
    """A single candidate reported by the suggestion source."""

    name: str
    description: str = ""
    kind: str = "member"


@dataclass(frozen=True, slots=True)
class CandidateToken:
    text: str
    replace_range: ReplaceRange


@dataclass(frozen=True, slots=True)
class SuggestionResult:
    candidates: tuple[ExpressionInfo, ...]
    active_token: str
    replace_range: ReplaceRange

    @classmethod
    def empty(cls, caret: int) -> "SuggestionResult":
        return cls(candidates=(), active_token="", replace_range=ReplaceRange(caret, 0))

    @property
    def token(self) -> CandidateToken:
        return CandidateToken(self.active_token, self.replace_range)


@dataclass(frozen=True, slots=True)
class CompletionItem:
    """Selectable completion bound to the range captured when it was built."""

    label: str
    insert_text: str
    replace_range: ReplaceRange
    description: str = ""
    kind: str = "member"
    token: str = ""
    on_insert: Optional[InsertionCallback] = field(
        default=None, repr=False, compare=False
    )

    def insert(self) -> int:
        """Apply the item and return the caret offset after insertion."""

        if self.on_insert is None:
            raise RuntimeError(f"Completion item '{self.label}' has no insertion target")
        return self.on_insert(
            self.insert_text, self.replace_range.offset, self.replace_range.length
        )


class SessionStatus(str, Enum):
    CLOSED = "closed"
    OPEN = "open"


@dataclass(frozen=True, slots=True)
class SessionState:
    status: SessionStatus = SessionStatus.CLOSED
    items: tuple[CompletionItem, ...] = ()
    selected_index: Optional[int] = None

    @classmethod
    def closed(cls) -> "SessionState":
        return cls()

    @classmethod
    def opened(cls, items: tuple[CompletionItem, ...]) -> "SessionState":
        if not items:
            return cls.closed()
        return cls(status=SessionStatus.OPEN, items=items, selected_index=0)

    @property
    def is_open(self) -> bool:
        return self.status is SessionStatus.OPEN

    @property
    def selected(self) -> Optional[CompletionItem]:
        if self.selected_index is None:
            return None
        return self.items[self.selected_index]

    def with_selection(self, index: int) -> "SessionState":
        if not self.items:
            return self
        return SessionState(
            status=self.status,
            items=self.items,
            selected_index=index % len(self.items),
        )


__all__ = [
    "CandidateToken",
    "CompletionItem",
    "ExpressionInfo",
    "InsertionCallback",
    "ReplaceRange",
    "SessionState",
    "SessionStatus",
    "SuggestionResult",
]
