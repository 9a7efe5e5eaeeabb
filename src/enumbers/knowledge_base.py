import logging
import re
from collections import Counter
from functools import lru_cache
from types import MappingProxyType
from typing import Iterable, Iterator, Mapping, NamedTuple, Optional

from .models import Entry
from .status import Status

logger = logging.getLogger(__name__)

CODE_PATTERN = re.compile(r"^E(\d{1,4})([a-z]*)$", re.ASCII)


class KnowledgeBaseError(Exception):
    """Raised when the static additive data is inconsistent."""


class InvalidCodeError(KnowledgeBaseError):
    """A segment holds a malformed code or an unnamed entry."""

    def __init__(self, code: str, segment: str, problem: str):
        self.code = code
        self.segment = segment
        super().__init__(f"Invalid entry {code!r} in segment '{segment}': {problem}")


class DuplicateCodeError(KnowledgeBaseError):
    """The same code is classified in more than one segment."""

    def __init__(self, code: str, segments: tuple[str, str]):
        self.code = code
        self.segments = segments
        super().__init__(
            f"Code {code} appears in both '{segments[0]}' and '{segments[1]}'"
        )


class Segment(NamedTuple):
    """One hand-curated partition of the additive table."""

    name: str
    status: Status
    entries: Mapping[str, Mapping]


def split_code(code: str) -> tuple[str, str]:
    """
    Split an E-number into its digit run and letter suffix.

    Parameters
    ----------
    code : str
        Well-formed code such as ``E472a``

    Returns
    -------
    tuple[str, str]
        Digits and (possibly empty) suffix, e.g. ``("472", "a")``
    """
    match = CODE_PATTERN.fullmatch(code)
    if not match:
        raise ValueError(f"Not an E-number: {code!r}")
    return match.group(1), match.group(2)


def _freeze(segment: Segment) -> Segment:
    """Read-only copy of a segment and its records."""
    entries = {code: MappingProxyType(dict(record)) for code, record in segment.entries.items()}
    return segment._replace(entries=MappingProxyType(entries))


class KnowledgeBase:
    """
    Immutable lookup table of E-numbers and their vegan status.

    Built once from an ordered sequence of segments. Segment order is the
    priority order for lookups and the ordering of prefix scans.
    """

    def __init__(self, segments: Iterable[Segment]):
        self._segments: tuple[Segment, ...] = tuple(_freeze(segment) for segment in segments)
        self._entries: dict[str, Entry] = {}
        self._segment_of: dict[str, str] = {}
        self._by_digits: dict[str, list[Entry]] = {}
        self._load()

    def _load(self):
        """Validate every segment and merge them into one namespace."""
        for segment in self._segments:
            for code, record in segment.entries.items():
                if not CODE_PATTERN.fullmatch(code):
                    logger.error(f"[KB] Malformed code {code!r} in {segment.name}")
                    raise InvalidCodeError(code, segment.name, "expected E<digits><lowercase letters>")
                if not str(record.get("name", "")).strip():
                    raise InvalidCodeError(code, segment.name, "missing name")
                if code in self._segment_of:
                    first = self._segment_of[code]
                    logger.error(f"[KB] Duplicate code {code} in {first} and {segment.name}")
                    raise DuplicateCodeError(code, (first, segment.name))

                entry = Entry(
                    code=code,
                    name=record["name"],
                    description=record.get("description", ""),
                    status=segment.status,
                )
                self._entries[code] = entry
                self._segment_of[code] = segment.name
                digits, _ = split_code(code)
                self._by_digits.setdefault(digits, []).append(entry)

        logger.info(
            f"[KB] Loaded {len(self._entries)} entries from {len(self._segments)} segments"
        )

    def get(self, code: str) -> Optional[Entry]:
        """Exact lookup; returns None when the code is unknown."""
        return self._entries.get(code)

    def scan_by_numeric_prefix(self, digits: str) -> list[Entry]:
        """
        Return every entry whose digit run equals ``digits`` exactly.

        ``"10"`` does not match ``E100``; ``"472"`` matches ``E472a`` to
        ``E472f``. Results follow segment order, then in-segment order.
        """
        return list(self._by_digits.get(digits, ()))

    def segment_of(self, code: str) -> Optional[str]:
        return self._segment_of.get(code)

    @property
    def segments(self) -> tuple[Segment, ...]:
        return self._segments

    @property
    def segment_names(self) -> list[str]:
        return [segment.name for segment in self._segments]

    def stats(self) -> dict:
        """Entry counts per segment and per status."""
        by_status = Counter(entry.status.value for entry in self._entries.values())
        return {
            "total": len(self._entries),
            "segments": {
                segment.name: len(segment.entries) for segment in self._segments
            },
            "statuses": {status.value: by_status.get(status.value, 0) for status in Status},
        }

    def __contains__(self, code: object) -> bool:
        return code in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[Entry]:
        return iter(self._entries.values())


@lru_cache(maxsize=1)
def get_knowledge_base() -> KnowledgeBase:
    """Get cached knowledge base built from the bundled segments."""
    from .data import SEGMENTS

    return KnowledgeBase(SEGMENTS)
