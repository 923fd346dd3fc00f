"""OneDish: turn any recipe into a one- or two-serving version."""

from .exceptions import ExtractionFailedError, MissingIngredientsError, OneDishError
from .models.recipe import ConvertedRecipe, Ingredient, IngredientCategory, Recipe
from .services.scaler import RecipeScaler, convert_recipe

__all__ = [
    "ConvertedRecipe",
    "ExtractionFailedError",
    "Ingredient",
    "IngredientCategory",
    "MissingIngredientsError",
    "OneDishError",
    "Recipe",
    "RecipeScaler",
    "convert_recipe",
]
