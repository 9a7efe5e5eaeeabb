import logging
from functools import lru_cache
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, Request
from langsmith import traceable

from src.api.schemas import EntryView, KnowledgeBaseStats, LookupResponse
from src.enumbers import (
    MatchKind,
    MatchReason,
    MatchResult,
    QueryResolver,
    get_knowledge_base,
    normalize_query,
)
from src.enumbers.status import (
    empty_query_message,
    multiple_matches_message,
    not_found_message,
)
from configs import get_settings, Settings

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/enumbers", tags=["enumbers"])

MAX_QUERY_LENGTH = 64


@lru_cache(maxsize=1)
def get_resolver() -> QueryResolver:
    return QueryResolver(get_knowledge_base())


def get_request_id(request: Request) -> str:
    return getattr(request.state, "request_id", "unknown")


@router.get("/search", response_model=LookupResponse)
@traceable(name="search_enumber_endpoint")
async def search_enumber(
    resolver: Annotated[QueryResolver, Depends(get_resolver)],
    settings: Annotated[Settings, Depends(get_settings)],
    request_id: Annotated[str, Depends(get_request_id)],
    q: Annotated[str, Query(description="E-number as typed, e.g. 471 or E160a")] = "",
):
    """
    Look up an E-number from free-form input.

    Returns a single entry, a list to choose from when several lettered
    variants share the digits, or a message when nothing matched.
    """
    if len(q) > MAX_QUERY_LENGTH:
        # No E-number is this long
        q = q[:MAX_QUERY_LENGTH]
        result = MatchResult.no_match(normalize_query(q), MatchReason.MALFORMED)
    else:
        result = resolver.resolve(q)
    language = settings.display_language

    logger.info(
        f"[{request_id}] Search {q!r} → {result.kind.value}"
        + (f" ({result.reason.value})" if result.reason else "")
    )

    message = None
    if result.kind is MatchKind.MULTIPLE:
        message = multiple_matches_message(language)
    elif result.reason is MatchReason.EMPTY_QUERY:
        message = empty_query_message(language)
    elif result.kind is MatchKind.NONE:
        message = not_found_message(language)

    return LookupResponse(
        request_id=request_id,
        query=result.query,
        kind=result.kind,
        reason=result.reason,
        display_code=result.display_code,
        message=message,
        matches=[EntryView.from_entry(entry, language) for entry in result.entries],
    )


@router.get("/stats", response_model=KnowledgeBaseStats)
async def knowledge_base_stats(
    resolver: Annotated[QueryResolver, Depends(get_resolver)],
):
    """Entry counts per segment and per status."""
    return KnowledgeBaseStats(**resolver.knowledge_base.stats())


@router.get("/{code}", response_model=EntryView)
@traceable(name="select_enumber_endpoint")
async def get_enumber(
    code: str,
    resolver: Annotated[QueryResolver, Depends(get_resolver)],
    settings: Annotated[Settings, Depends(get_settings)],
    request_id: Annotated[str, Depends(get_request_id)],
):
    """Details for one exact E-number, as picked from a list of matches."""
    result = resolver.select(code)
    if result.entry is None:
        logger.info(f"[{request_id}] Unknown E-number {code!r}")
        raise HTTPException(
            status_code=404,
            detail=not_found_message(settings.display_language)
        )
    return EntryView.from_entry(result.entry, settings.display_language)
