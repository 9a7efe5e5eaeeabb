import pytest
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))


@pytest.fixture
def sample_segments():
    from src.enumbers import Segment, Status

    return [
        Segment("non_vegan", Status.NON_VEGAN, {
            "E120": {"name": "Karmin", "description": "Från sköldlöss."},
            "E904": {"name": "Schellack", "description": "Från lacksköldlöss."},
        }),
        Segment("uncertain", Status.UNCERTAIN, {
            "E471": {"name": "Mono- och diglycerider", "description": "Kan vara animaliskt."},
            "E161b": {"name": "Lutein", "description": "Kan komma från äggula."},
        }),
        Segment("vegan_1", Status.VEGAN, {
            "E100": {"name": "Kurkumin", "description": "Från gurkmeja."},
            "E161g": {"name": "Kantaxantin", "description": "Syntetisk."},
            "E471a": {"name": "Testvariant", "description": "Påhittad variant."},
        }),
        Segment("vegan_2", Status.VEGAN, {
            "E1000": {"name": "Fyrsiffrig", "description": ""},
        }),
    ]


@pytest.fixture
def sample_kb(sample_segments):
    from src.enumbers import KnowledgeBase

    return KnowledgeBase(sample_segments)


@pytest.fixture
def kb():
    from src.enumbers import get_knowledge_base

    return get_knowledge_base()


@pytest.fixture
def resolver(kb):
    from src.enumbers import QueryResolver

    return QueryResolver(kb)


@pytest.fixture
def sample_ingredients():
    return [
        "vatten",
        "socker",
        "emulgeringsmedel (E471)",
        "färgämne E120",
        "förtjockningsmedel (E415, e407)",
        "skummjölkspulver",
    ]


@pytest.fixture
def backend_payload():
    return {
        "success": True,
        "isVegan": True,
        "confidence": 0.82,
        "allIngredients": [
            "vetemjöl",
            "socker",
            "färgämne (E120)",
            "emulgeringsmedel (E 471)",
            "salt",
        ],
        "nonVeganIngredients": [],
        "watchedIngredients": [],
        "reasoning": "Inga animaliska ingredienser hittades.",
        "detectedLanguage": "sv",
    }
