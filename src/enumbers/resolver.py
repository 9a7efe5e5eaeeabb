import logging
import re
from typing import Optional

from .knowledge_base import KnowledgeBase, get_knowledge_base
from .models import MatchReason, MatchResult

logger = logging.getLogger(__name__)

DIGITS_PATTERN = re.compile(r"^\d+$", re.ASCII)
QUERY_PATTERN = re.compile(r"^(\d+)([a-zA-Z]*)$", re.ASCII)


def normalize_query(raw: Optional[str]) -> str:
    """
    Clean up raw user input before matching.

    Trims surrounding whitespace and strips a single leading ``E``/``e``.

    Parameters
    ----------
    raw : str or None
        Text as typed by the user

    Returns
    -------
    str
        Normalized query, possibly empty
    """
    text = (raw or "").strip()
    if text[:1] in ("E", "e"):
        text = text[1:]
    return text


class QueryResolver:
    """
    Resolve free-form E-number queries against a knowledge base.

    Stateless apart from the knowledge base reference, so a single
    instance can be shared between requests.
    """

    def __init__(self, knowledge_base: Optional[KnowledgeBase] = None):
        self._kb = knowledge_base if knowledge_base is not None else get_knowledge_base()

    @property
    def knowledge_base(self) -> KnowledgeBase:
        return self._kb

    def resolve(self, raw: Optional[str]) -> MatchResult:
        """
        Resolve a query into no match, a single entry or a candidate list.

        Parameters
        ----------
        raw : str or None
            Raw query, e.g. ``"e471"``, ``" 160 "`` or ``"472A"``

        Returns
        -------
        MatchResult
            Never raises for malformed input
        """
        query = normalize_query(raw)
        if not query:
            return MatchResult.no_match(query, MatchReason.EMPTY_QUERY)

        if DIGITS_PATTERN.fullmatch(query):
            candidates = self._digit_candidates(query)
            if len(candidates) > 1:
                logger.debug(f"[RESOLVE] {query!r} → {len(candidates)} candidates")
                return MatchResult.multiple(query, candidates)
            if len(candidates) == 1:
                return MatchResult.single(query, candidates[0])

        return self._exact_match(query)

    def select(self, code: str) -> MatchResult:
        """
        Resolve a code picked from a disambiguation list.

        Unlike ``resolve`` this never widens to lettered variants: ``"E101"``
        selects E101 even though E101a exists.
        """
        query = normalize_query(code)
        if not query:
            return MatchResult.no_match(query, MatchReason.EMPTY_QUERY)
        return self._exact_match(query)

    def _digit_candidates(self, digits: str) -> list:
        pattern = re.compile(rf"^E{digits}[a-zA-Z]*$")
        return [
            entry for entry in self._kb.scan_by_numeric_prefix(digits)
            if pattern.match(entry.code)
        ]

    def _exact_match(self, query: str) -> MatchResult:
        match = QUERY_PATTERN.fullmatch(query)
        if not match:
            return MatchResult.no_match(query, MatchReason.MALFORMED)

        digits, suffix = match.group(1), match.group(2).lower()
        formatted = f"E{digits}{suffix}"

        entry = self._kb.get(formatted)
        if entry is None:
            return MatchResult.no_match(query, MatchReason.NOT_FOUND)
        return MatchResult.single(query, entry)


def resolve_query(raw: Optional[str]) -> MatchResult:
    """Resolve against the bundled knowledge base."""
    return QueryResolver().resolve(raw)
