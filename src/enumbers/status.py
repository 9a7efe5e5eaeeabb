from enum import Enum
from typing import NamedTuple


class Status(str, Enum):
    """Vegan classification of a food additive."""

    VEGAN = "vegan"
    NON_VEGAN = "non-vegan"
    UNCERTAIN = "uncertain"


class DisplayStatus(str, Enum):
    """
    Status vocabulary used when rendering ingredients.

    Superset of ``Status`` with ``unknown`` for free-text ingredients that
    were never matched against the knowledge base.
    """

    VEGAN = "vegan"
    NON_VEGAN = "non-vegan"
    UNCERTAIN = "uncertain"
    UNKNOWN = "unknown"

    @classmethod
    def from_status(cls, status: Status) -> "DisplayStatus":
        return cls(Status(status).value)


class StatusDisplay(NamedTuple):
    status: DisplayStatus
    color_token: str
    color: str
    label: str
    requires_advisory: bool


DEFAULT_LANGUAGE = "sv"

_COLORS: dict[DisplayStatus, tuple[str, str]] = {
    DisplayStatus.VEGAN: ("success", "#4CAF50"),
    DisplayStatus.NON_VEGAN: ("error", "#F44336"),
    DisplayStatus.UNCERTAIN: ("warning", "#FF9800"),
    DisplayStatus.UNKNOWN: ("neutral", "#757575"),
}

_LABELS: dict[str, dict[DisplayStatus, str]] = {
    "sv": {
        DisplayStatus.VEGAN: "Veganskt",
        DisplayStatus.NON_VEGAN: "Ej veganskt",
        DisplayStatus.UNCERTAIN: "Osäker vegansk status",
        DisplayStatus.UNKNOWN: "Okänd status",
    },
    "en": {
        DisplayStatus.VEGAN: "Vegan",
        DisplayStatus.NON_VEGAN: "Not vegan",
        DisplayStatus.UNCERTAIN: "Uncertain vegan status",
        DisplayStatus.UNKNOWN: "Unknown status",
    },
}

_ADVISORY_NOTES = {
    "sv": (
        "Vi rekommenderar att du kontaktar tillverkaren för att få ett "
        "säkert svar på om det är veganskt."
    ),
    "en": (
        "We recommend contacting the manufacturer for a definite answer "
        "on whether it is vegan."
    ),
}

_NOT_FOUND_MESSAGES = {
    "sv": (
        "Vi hittade inte detta E-nummer i vår databas. "
        "Kontrollera att du angivit rätt nummer."
    ),
    "en": (
        "We could not find this E-number in our database. "
        "Check that you entered the correct number."
    ),
}

_EMPTY_QUERY_MESSAGES = {
    "sv": "Ange ett E-nummer att söka efter.",
    "en": "Enter an E-number to search for.",
}

_MULTIPLE_MATCHES_MESSAGES = {
    "sv": "Flera E-nummer hittades. Välj ett för mer information.",
    "en": "Several E-numbers were found. Pick one for more information.",
}


def _language(language: str | None) -> str:
    return language if language in _LABELS else DEFAULT_LANGUAGE


def display_for(status: Status | DisplayStatus | str, language: str | None = None) -> StatusDisplay:
    """
    Map a classification to its colour token and localized label.

    Parameters
    ----------
    status : Status, DisplayStatus or str
        Classification to render; plain strings must be a known value
    language : str, optional
        ``"sv"`` or ``"en"``; anything else falls back to Swedish

    Returns
    -------
    StatusDisplay
        Rendering details shared by E-number lookups and ingredient lists
    """
    display_status = DisplayStatus(getattr(status, "value", status))
    token, color = _COLORS[display_status]
    return StatusDisplay(
        status=display_status,
        color_token=token,
        color=color,
        label=_LABELS[_language(language)][display_status],
        requires_advisory=display_status is DisplayStatus.UNCERTAIN,
    )


def advisory_note(language: str | None = None) -> str:
    return _ADVISORY_NOTES[_language(language)]


def not_found_message(language: str | None = None) -> str:
    return _NOT_FOUND_MESSAGES[_language(language)]


def empty_query_message(language: str | None = None) -> str:
    return _EMPTY_QUERY_MESSAGES[_language(language)]


def multiple_matches_message(language: str | None = None) -> str:
    return _MULTIPLE_MATCHES_MESSAGES[_language(language)]
