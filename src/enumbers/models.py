from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from .status import Status


class Entry(BaseModel):
    """A single food additive in the knowledge base."""

    model_config = ConfigDict(frozen=True)

    code: str = Field(..., description="E-number, e.g. E471 or E472a")
    name: str
    description: str = ""
    status: Status

    @property
    def display_code(self) -> str:
        """Code without the leading E, as echoed back to the user."""
        return self.code[1:]


class MatchKind(str, Enum):
    NONE = "none"
    SINGLE = "single"
    MULTIPLE = "multiple"


class MatchReason(str, Enum):
    """Why a query produced no match."""

    EMPTY_QUERY = "empty_query"
    MALFORMED = "malformed"
    NOT_FOUND = "not_found"


class MatchResult(BaseModel):
    """Outcome of resolving one user query against the knowledge base."""

    model_config = ConfigDict(frozen=True)

    kind: MatchKind
    query: str = Field(default="", description="Normalized query")
    reason: Optional[MatchReason] = None
    entries: tuple[Entry, ...] = ()
    display_code: Optional[str] = None

    @classmethod
    def no_match(cls, query: str, reason: MatchReason) -> "MatchResult":
        return cls(kind=MatchKind.NONE, query=query, reason=reason)

    @classmethod
    def single(cls, query: str, entry: Entry) -> "MatchResult":
        return cls(
            kind=MatchKind.SINGLE,
            query=query,
            entries=(entry,),
            display_code=entry.display_code,
        )

    @classmethod
    def multiple(cls, query: str, entries: list[Entry]) -> "MatchResult":
        return cls(kind=MatchKind.MULTIPLE, query=query, entries=tuple(entries))

    @property
    def is_match(self) -> bool:
        return self.kind is not MatchKind.NONE

    @property
    def entry(self) -> Optional[Entry]:
        """The resolved entry for a single match, otherwise None."""
        if self.kind is MatchKind.SINGLE:
            return self.entries[0]
        return None
