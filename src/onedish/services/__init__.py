"""Pure recipe services: amount handling, categorization and scaling."""

from .amounts import format_amount, parse_amount
from .categorizer import categorize, is_baking_recipe
from .scaler import CategoryPolicy, RecipeScaler, convert_recipe

__all__ = [
    "CategoryPolicy",
    "RecipeScaler",
    "categorize",
    "convert_recipe",
    "format_amount",
    "is_baking_recipe",
    "parse_amount",
]
