from pydantic import BaseModel, ConfigDict, Field
from typing import Optional

from src.enumbers.status import DisplayStatus, Status


class WatchedIngredient(BaseModel):
    """Ingredient flagged as non-vegan or uncertain in a product analysis."""

    name: str
    description: Optional[str] = None
    reason: Optional[str] = None
    status: Status


class IngredientListItem(BaseModel):
    """One line of a scanned ingredient list, ready for display."""

    name: str
    description: Optional[str] = None
    status: DisplayStatus = DisplayStatus.UNKNOWN
    reason: Optional[str] = None
    code: Optional[str] = Field(
        default=None,
        description="Matched E-number(s), comma separated"
    )


class ProductAnalysis(BaseModel):
    """Verdict for a scanned product."""

    is_vegan: Optional[bool] = None
    is_uncertain: bool = False
    confidence: float = 0.0
    watched_ingredients: list[WatchedIngredient] = Field(default_factory=list)
    reasoning: Optional[str] = None
    detected_language: Optional[str] = None
    uncertain_reasons: list[str] = Field(default_factory=list)


class ImageAnalysisResponse(BaseModel):
    """JSON body returned by the vision analysis backend."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    success: Optional[bool] = None
    error: Optional[str] = None
    is_vegan: bool = Field(..., alias="isVegan")
    confidence: float = 0.0
    all_ingredients: list[str] = Field(..., alias="allIngredients")
    non_vegan_ingredients: list[str] = Field(default_factory=list, alias="nonVeganIngredients")
    watched_ingredients: list[WatchedIngredient] = Field(
        default_factory=list,
        alias="watchedIngredients"
    )
    reasoning: Optional[str] = None
    detected_language: Optional[str] = Field(default=None, alias="detectedLanguage")
