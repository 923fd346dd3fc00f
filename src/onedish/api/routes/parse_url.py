import logging

from fastapi import APIRouter, Depends, HTTPException

from ...exceptions import ExtractionFailedError
from ...models.recipe import Recipe
from ...sources import RecipeSource
from ..dependencies import get_recipe_source
from ..schemas import ParseUrlRequest

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["recipes"])


@router.post("/parse-url", response_model=Recipe, response_model_exclude_none=True)
async def parse_url(request: ParseUrlRequest, source: RecipeSource = Depends(get_recipe_source)):
    """Acquire a recipe from a URL."""
    if not request.url:
        raise HTTPException(status_code=400, detail="Missing URL in request body.")

    try:
        return source.get_recipe(request.url)
    except ExtractionFailedError as e:
        logger.error(f"Recipe extraction failed for {request.url}: {e}")
        raise HTTPException(status_code=502, detail=str(e))
    except Exception:
        logger.exception("Unexpected error in /api/parse-url")
        raise HTTPException(status_code=500, detail="Unexpected error parsing recipe URL.")
