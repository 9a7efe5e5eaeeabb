from .status import Status, DisplayStatus, StatusDisplay, display_for
from .models import Entry, MatchKind, MatchReason, MatchResult
from .knowledge_base import (
    KnowledgeBase,
    KnowledgeBaseError,
    DuplicateCodeError,
    InvalidCodeError,
    Segment,
    get_knowledge_base,
    split_code,
)
from .resolver import QueryResolver, normalize_query, resolve_query

__all__ = [
    "Status",
    "DisplayStatus",
    "StatusDisplay",
    "display_for",
    "Entry",
    "MatchKind",
    "MatchReason",
    "MatchResult",
    "KnowledgeBase",
    "KnowledgeBaseError",
    "DuplicateCodeError",
    "InvalidCodeError",
    "Segment",
    "get_knowledge_base",
    "split_code",
    "QueryResolver",
    "normalize_query",
    "resolve_query",
]
