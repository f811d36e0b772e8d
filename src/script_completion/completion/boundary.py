"""Pure trigger predicates for opening and closing the completion popup.

The language decisions belong to the suggestion source. This module only adds
the pre-insertion lookahead: a keystroke is inspected before its character
lands in the buffer, so a trigger must consider both the current position and
the position the caret is about to reach.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from .source import SuggestionSource


class TriggerPolicy(str, Enum):
    OPEN_ON_BEGINNING = "open_on_beginning"
    CLOSE_ON_STEPPING_OUT = "close_on_stepping_out"
    CLOSE_ON_DELIMITER = "close_on_delimiter"


class UnknownTriggerPolicyError(ValueError):
    def __init__(self, policy: object) -> None:
        super().__init__(f"Unknown trigger policy {policy!r}")
        self.policy = policy


def is_beginning_of_expression(
    source: SuggestionSource, text: Optional[str], caret: int, next_char: str
) -> bool:
    current = text or ""
    if source.is_beginning_of_expression(current, caret):
        return True
    with_next = current[:caret] + next_char + current[caret:]
    return source.is_beginning_of_expression(with_next, caret + 1)


def is_end_of_expression_delimiter(source: SuggestionSource, next_char: str) -> bool:
    return source.is_end_of_expression_delimiter(next_char)


def is_stepping_out_of_expression(
    source: SuggestionSource, text: Optional[str], caret: int
) -> bool:
    return not source.is_beginning_of_expression(text or "", caret)


def evaluate_policy(
    policy: TriggerPolicy,
    source: SuggestionSource,
    text: Optional[str],
    caret: int,
    next_char: Optional[str] = None,
) -> bool:
    """Answer whether ``policy`` fires for ``(text, caret, next_char)``.

    ``next_char`` is required by the keystroke policies and ignored by
    ``CLOSE_ON_STEPPING_OUT``, which reacts to caret movement.
    """

    if policy is TriggerPolicy.OPEN_ON_BEGINNING:
        if next_char is None:
            return False
        return is_beginning_of_expression(source, text, caret, next_char)
    if policy is TriggerPolicy.CLOSE_ON_DELIMITER:
        if next_char is None:
            return False
        return is_end_of_expression_delimiter(source, next_char)
    if policy is TriggerPolicy.CLOSE_ON_STEPPING_OUT:
        return is_stepping_out_of_expression(source, text, caret)
    raise UnknownTriggerPolicyError(policy)


__all__ = [
    "TriggerPolicy",
    "UnknownTriggerPolicyError",
    "evaluate_policy",
    "is_beginning_of_expression",
    "is_end_of_expression_delimiter",
    "is_stepping_out_of_expression",
]
