import logging
import math

from fastapi import APIRouter, HTTPException
from pydantic import ValidationError

from ...exceptions import MissingIngredientsError
from ...models.recipe import ConvertedRecipe, Recipe
from ...services.scaler import convert_recipe
from ..schemas import ConvertRecipeRequest

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["convert"])

MISSING_RECIPE_DETAIL = "Missing or invalid recipe in request body."
INVALID_TARGET_DETAIL = "Invalid targetServings in request body."


def _is_positive_number(value) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value) and value > 0


@router.post("/convert-recipe", response_model=ConvertedRecipe, response_model_exclude_none=True)
async def convert_recipe_endpoint(request: ConvertRecipeRequest):
    """Scale a recipe to the requested number of servings."""
    if not isinstance(request.recipe, dict):
        raise HTTPException(status_code=400, detail=MISSING_RECIPE_DETAIL)
    try:
        recipe = Recipe.model_validate(request.recipe)
    except ValidationError as e:
        logger.warning(f"Rejected invalid recipe: {e.error_count()} validation error(s)")
        raise HTTPException(status_code=400, detail=MISSING_RECIPE_DETAIL)
    if not recipe.ingredients:
        raise HTTPException(status_code=400, detail=MISSING_RECIPE_DETAIL)
    if not _is_positive_number(request.targetServings):
        raise HTTPException(status_code=400, detail=INVALID_TARGET_DETAIL)

    try:
        return convert_recipe(recipe, request.targetServings)
    except MissingIngredientsError as e:
        logger.warning(f"Rejected recipe without ingredients: {e}")
        raise HTTPException(status_code=400, detail=MISSING_RECIPE_DETAIL)
    except Exception:
        logger.exception("Unexpected error in /api/convert-recipe")
        raise HTTPException(status_code=500, detail="Unexpected error converting recipe.")
