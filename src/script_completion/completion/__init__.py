"""Completion triggers, suggestion adaptation, and the popup session."""

from .adapter import SuggestionAdapter
from .boundary import (
    TriggerPolicy,
    UnknownTriggerPolicyError,
    evaluate_policy,
    is_beginning_of_expression,
    is_end_of_expression_delimiter,
    is_stepping_out_of_expression,
)
from .bus import EventBus
from .models import (
    CandidateToken,
    CompletionItem,
    ExpressionInfo,
    ReplaceRange,
    SessionState,
    SessionStatus,
    SuggestionResult,
)
from .session import CompletionSession, SessionClosedError
from .source import SuggestionSource
from .sources import NamespaceSuggestionSource

__all__ = [
    "CandidateToken",
    "CompletionItem",
    "CompletionSession",
    "EventBus",
    "ExpressionInfo",
    "NamespaceSuggestionSource",
    "ReplaceRange",
    "SessionClosedError",
    "SessionState",
    "SessionStatus",
    "SuggestionAdapter",
    "SuggestionResult",
    "SuggestionSource",
    "TriggerPolicy",
    "UnknownTriggerPolicyError",
    "evaluate_policy",
    "is_beginning_of_expression",
    "is_end_of_expression_delimiter",
    "is_stepping_out_of_expression",
]
