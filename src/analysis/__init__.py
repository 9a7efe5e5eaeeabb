from .models import (
    WatchedIngredient,
    IngredientListItem,
    ProductAnalysis,
    ImageAnalysisResponse,
)
from .annotator import (
    IngredientAnnotator,
    build_product_analysis,
    extract_codes,
    summarize,
    watched_from_response,
)
from .client import (
    AnalysisClient,
    AnalysisServiceError,
    AnalysisBackendError,
    InvalidAnalysisResponseError,
)

__all__ = [
    "WatchedIngredient",
    "IngredientListItem",
    "ProductAnalysis",
    "ImageAnalysisResponse",
    "IngredientAnnotator",
    "build_product_analysis",
    "extract_codes",
    "summarize",
    "watched_from_response",
    "AnalysisClient",
    "AnalysisServiceError",
    "AnalysisBackendError",
    "InvalidAnalysisResponseError",
]
