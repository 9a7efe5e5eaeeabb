"""
Bundled E-number tables.

The table is split into hand-maintained segments; the order of ``SEGMENTS``
is the lookup priority and the ordering of disambiguation lists.
"""
from src.enumbers.knowledge_base import Segment
from src.enumbers.status import Status

from .non_vegan import NON_VEGAN_ENUMBERS
from .uncertain import UNCERTAIN_ENUMBERS
from .vegan_colours import VEGAN_COLOURS
from .vegan_preservatives import VEGAN_PRESERVATIVES
from .vegan_thickeners import VEGAN_THICKENERS
from .vegan_processing import VEGAN_PROCESSING

SEGMENTS = (
    Segment("non_vegan", Status.NON_VEGAN, NON_VEGAN_ENUMBERS),
    Segment("uncertain", Status.UNCERTAIN, UNCERTAIN_ENUMBERS),
    Segment("vegan_colours", Status.VEGAN, VEGAN_COLOURS),
    Segment("vegan_preservatives", Status.VEGAN, VEGAN_PRESERVATIVES),
    Segment("vegan_thickeners", Status.VEGAN, VEGAN_THICKENERS),
    Segment("vegan_processing", Status.VEGAN, VEGAN_PROCESSING),
)

__all__ = ["SEGMENTS"]
