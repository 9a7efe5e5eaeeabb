import logging
from functools import lru_cache
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException
from langsmith import traceable

from src.analysis import (
    AnalysisClient,
    AnalysisServiceError,
    IngredientAnnotator,
    build_product_analysis,
    summarize,
    watched_from_response,
)
from src.api.routes.enumbers import get_request_id
from src.api.schemas import (
    AnalyzeRequest,
    AnalyzeResponse,
    AnnotateRequest,
    AnnotateResponse,
)
from src.enumbers import get_knowledge_base
from configs import get_settings, Settings

logger = logging.getLogger(__name__)
router = APIRouter(tags=["analysis"])


@lru_cache(maxsize=1)
def get_annotator() -> IngredientAnnotator:
    return IngredientAnnotator(get_knowledge_base())


def get_analysis_client(
    request_id: Annotated[str, Depends(get_request_id)],
) -> AnalysisClient:
    return AnalysisClient(request_id=request_id)


@router.post("/ingredients/annotate", response_model=AnnotateResponse)
@traceable(name="annotate_ingredients_endpoint")
async def annotate_ingredients(
    request: AnnotateRequest,
    annotator: Annotated[IngredientAnnotator, Depends(get_annotator)],
    settings: Annotated[Settings, Depends(get_settings)],
    request_id: Annotated[str, Depends(get_request_id)],
):
    """
    Annotate an ingredient list with vegan status.

    E-numbers are classified from the knowledge base; other ingredients
    match against the supplied watched ingredients or stay unknown.
    """
    if len(request.ingredients) > settings.max_ingredients:
        raise HTTPException(
            status_code=400,
            detail=f"At most {settings.max_ingredients} ingredients per request"
        )

    items = annotator.annotate(request.ingredients, request.watched, request_id=request_id)
    return AnnotateResponse(
        request_id=request_id,
        items=items,
        counts=summarize(items),
    )


@router.post("/analyze", response_model=AnalyzeResponse)
@traceable(name="analyze_image_endpoint")
async def analyze_image(
    request: AnalyzeRequest,
    client: Annotated[AnalysisClient, Depends(get_analysis_client)],
    annotator: Annotated[IngredientAnnotator, Depends(get_annotator)],
    request_id: Annotated[str, Depends(get_request_id)],
):
    """
    Analyze an ingredient-list image.

    The image is forwarded to the vision backend; its ingredient list is
    then annotated against the knowledge base.
    """
    logger.info(f"[{request_id}] Analyzing image ({len(request.image)} base64 chars)")

    try:
        response = await client.analyze_image(request.image)
    except AnalysisServiceError as e:
        raise HTTPException(status_code=502, detail=str(e)) from e

    items = annotator.annotate(
        response.all_ingredients,
        watched_from_response(response),
        request_id=request_id
    )
    analysis = build_product_analysis(response, items)

    return AnalyzeResponse(
        request_id=request_id,
        analysis=analysis,
        ingredients=items,
        counts=summarize(items),
    )
