from .recipe import ConvertedRecipe, Ingredient, IngredientCategory, Recipe

__all__ = ["ConvertedRecipe", "Ingredient", "IngredientCategory", "Recipe"]
