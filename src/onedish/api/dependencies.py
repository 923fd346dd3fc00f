"""FastAPI dependencies shared by the API routes."""

from typing import Optional

from ..sources import RecipeSource, SampleRecipeSource

_recipe_source: Optional[RecipeSource] = None


def get_recipe_source() -> RecipeSource:
    """Return the process-wide recipe source, creating it on first use."""
    global _recipe_source
    if _recipe_source is None:
        _recipe_source = SampleRecipeSource()
    return _recipe_source
