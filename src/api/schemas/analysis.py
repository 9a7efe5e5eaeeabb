from pydantic import BaseModel, Field

from src.analysis import IngredientListItem, ProductAnalysis, WatchedIngredient


class AnnotateRequest(BaseModel):
    """Ingredient list to annotate with vegan status."""

    ingredients: list[str] = Field(
        ...,
        min_length=1,
        description="Ingredient names as printed on the package"
    )
    watched: list[WatchedIngredient] = Field(
        default_factory=list,
        description="Ingredients already flagged by an analysis"
    )


class AnnotateResponse(BaseModel):
    request_id: str
    items: list[IngredientListItem]
    counts: dict[str, int]


class AnalyzeRequest(BaseModel):
    """Request with a base64 encoded ingredient-list image."""

    image: str = Field(
        ...,
        min_length=1,
        description="Base64 encoded, cropped ingredient-list image"
    )


class AnalyzeResponse(BaseModel):
    """Backend verdict merged with knowledge-base annotations."""

    request_id: str
    analysis: ProductAnalysis
    ingredients: list[IngredientListItem]
    counts: dict[str, int]
