from pydantic import BaseModel, Field
from typing import Optional

from src.enumbers import Entry, MatchKind, MatchReason, Status, display_for
from src.enumbers.status import advisory_note


class StatusDisplaySchema(BaseModel):
    """Colour and label used to render a classification."""

    color_token: str
    color: str
    label: str


class EntryView(BaseModel):
    """E-number details for rendering a single result or a list row."""

    code: str = Field(..., description="E-number, e.g. E471")
    display_code: str = Field(..., description="Code without the leading E")
    name: str
    description: str
    status: Status
    display: StatusDisplaySchema
    advisory: Optional[str] = Field(
        default=None,
        description="Extra note shown for uncertain additives"
    )

    @classmethod
    def from_entry(cls, entry: Entry, language: str) -> "EntryView":
        display = display_for(entry.status, language)
        return cls(
            code=entry.code,
            display_code=entry.display_code,
            name=entry.name,
            description=entry.description,
            status=entry.status,
            display=StatusDisplaySchema(
                color_token=display.color_token,
                color=display.color,
                label=display.label,
            ),
            advisory=advisory_note(language) if display.requires_advisory else None,
        )


class LookupResponse(BaseModel):
    """Response for an E-number search."""

    request_id: str
    query: str = Field(..., description="Normalized query")
    kind: MatchKind
    reason: Optional[MatchReason] = None
    display_code: Optional[str] = None
    message: Optional[str] = None
    matches: list[EntryView] = Field(default_factory=list)


class KnowledgeBaseStats(BaseModel):
    total: int
    segments: dict[str, int]
    statuses: dict[str, int]
