from .enumbers import (
    StatusDisplaySchema,
    EntryView,
    LookupResponse,
    KnowledgeBaseStats,
)
from .analysis import (
    AnnotateRequest,
    AnnotateResponse,
    AnalyzeRequest,
    AnalyzeResponse,
)

__all__ = [
    "StatusDisplaySchema",
    "EntryView",
    "LookupResponse",
    "KnowledgeBaseStats",
    "AnnotateRequest",
    "AnnotateResponse",
    "AnalyzeRequest",
    "AnalyzeResponse",
]
