import logging
import re
from collections import Counter
from typing import Iterable, Optional

from langsmith import traceable

from src.enumbers import Entry, KnowledgeBase, Status, get_knowledge_base
from src.enumbers.status import DisplayStatus
from .models import (
    ImageAnalysisResponse,
    IngredientListItem,
    ProductAnalysis,
    WatchedIngredient,
)

logger = logging.getLogger(__name__)

# "E471", "e 471", "E-160a", "E 150d", "E160aii"
CODE_MENTION_PATTERN = re.compile(r"\bE\s?-?\s?(\d{3,4})([a-z]*)\b", re.IGNORECASE | re.ASCII)

_SEVERITY = {
    Status.NON_VEGAN: 2,
    Status.UNCERTAIN: 1,
    Status.VEGAN: 0,
}


def extract_codes(text: str) -> list[str]:
    """
    Find E-numbers mentioned in free text.

    Parameters
    ----------
    text : str
        Ingredient text, e.g. ``"emulgeringsmedel (E 471, e322)"``

    Returns
    -------
    list[str]
        Canonical codes (``E`` + digits + lowercase suffix), de-duplicated,
        in order of appearance
    """
    found = []
    for digits, suffix in CODE_MENTION_PATTERN.findall(text or ""):
        code = f"E{digits}{suffix.lower()}"
        if code not in found:
            found.append(code)
    return found


def watched_from_response(response: ImageAnalysisResponse) -> list[WatchedIngredient]:
    """Backend watched ingredients plus its plain non-vegan name list."""
    watched = list(response.watched_ingredients)
    known = {w.name.lower() for w in watched}
    for name in response.non_vegan_ingredients:
        if name.lower() not in known:
            watched.append(WatchedIngredient(name=name, reason="non-vegan", status=Status.NON_VEGAN))
            known.add(name.lower())
    return watched


class IngredientAnnotator:
    """
    Attach a display status to each ingredient of a scanned list.

    E-numbers mentioned in an ingredient are looked up in the knowledge
    base; otherwise the ingredient is compared against the watched
    ingredients reported by the analysis backend.
    """

    def __init__(self, knowledge_base: Optional[KnowledgeBase] = None):
        self._kb = knowledge_base if knowledge_base is not None else get_knowledge_base()

    @traceable(name="annotate_ingredients")
    def annotate(
        self,
        ingredients: Iterable[str],
        watched: Optional[list[WatchedIngredient]] = None,
        request_id: str = None
    ) -> list[IngredientListItem]:
        """
        Annotate an ingredient list.

        Parameters
        ----------
        ingredients : Iterable[str]
            Ingredient names as printed on the package
        watched : list[WatchedIngredient], optional
            Ingredients flagged by the analysis backend
        request_id : str, optional
            Request ID for log correlation

        Returns
        -------
        list[IngredientListItem]
            One item per input ingredient, in input order
        """
        watched = watched or []
        items = [self._annotate_one(name, watched) for name in ingredients]

        counts = summarize(items)
        logger.info(
            f"[{request_id}] Annotated {len(items)} ingredients: "
            f"{counts['non-vegan']} non-vegan, {counts['uncertain']} uncertain, "
            f"{counts['vegan']} vegan, {counts['unknown']} unknown"
        )
        return items

    def _annotate_one(self, name: str, watched: list[WatchedIngredient]) -> IngredientListItem:
        entries = self._lookup_codes(name)
        if entries:
            decisive = max(entries, key=lambda e: _SEVERITY[e.status])
            return IngredientListItem(
                name=name,
                description=decisive.description,
                status=DisplayStatus.from_status(decisive.status),
                reason=f"{decisive.code}: {decisive.name}",
                code=", ".join(entry.code for entry in entries),
            )

        lowered = name.lower()
        for item in watched:
            if item.name and item.name.lower() in lowered:
                return IngredientListItem(
                    name=name,
                    description=item.description,
                    status=DisplayStatus.from_status(item.status),
                    reason=item.reason,
                )

        return IngredientListItem(name=name)

    def _lookup_codes(self, text: str) -> list[Entry]:
        entries = []
        for code in extract_codes(text):
            entry = self._kb.get(code)
            # Sub-indices like E322i or E160aii are reported under a shorter code
            while entry is None and not code[-1].isdigit():
                code = code[:-1]
                entry = self._kb.get(code)
            if entry is not None and entry not in entries:
                entries.append(entry)
        return entries


def summarize(items: Iterable[IngredientListItem]) -> dict[str, int]:
    """Count items per display status; every status is present."""
    counts = Counter(item.status.value for item in items)
    return {status.value: counts.get(status.value, 0) for status in DisplayStatus}


def build_product_analysis(
    response: ImageAnalysisResponse,
    items: list[IngredientListItem]
) -> ProductAnalysis:
    """
    Merge the backend verdict with knowledge-base findings.

    A non-vegan E-number found locally overrides a vegan verdict from the
    backend.
    """
    watched = watched_from_response(response)
    known = {w.name.lower() for w in watched}

    for item in items:
        if item.status in (DisplayStatus.NON_VEGAN, DisplayStatus.UNCERTAIN) and item.name.lower() not in known:
            watched.append(WatchedIngredient(
                name=item.name,
                description=item.description,
                reason=item.reason,
                status=Status(item.status.value),
            ))
            known.add(item.name.lower())

    has_non_vegan = any(item.status is DisplayStatus.NON_VEGAN for item in items)
    uncertain_names = [item.name for item in items if item.status is DisplayStatus.UNCERTAIN]

    is_vegan = response.is_vegan
    if has_non_vegan and is_vegan:
        logger.warning("Backend reported vegan but the ingredient list contains a non-vegan E-number")
        is_vegan = False

    return ProductAnalysis(
        is_vegan=is_vegan,
        is_uncertain=bool(uncertain_names) and not has_non_vegan,
        confidence=response.confidence,
        watched_ingredients=watched,
        reasoning=response.reasoning,
        detected_language=response.detected_language,
        uncertain_reasons=uncertain_names,
    )
