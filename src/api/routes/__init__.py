from .enumbers import router as enumbers_router
from .analysis import router as analysis_router

__all__ = ["enumbers_router", "analysis_router"]
