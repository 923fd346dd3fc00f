"""
Recipe models shared by the scaling engine, the API and the CLI.

Field names follow the JSON the frontend exchanges (camelCase), so models can
be dumped straight into responses.
"""

from enum import Enum
from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class IngredientCategory(str, Enum):
    """Scaling category of an ingredient, derived from its name."""
    EGG = "egg"
    LEMON_LIME = "lemonLime"
    ONION = "onion"
    GARLIC = "garlic"
    HERB = "herb"
    SPICE = "spice"
    OIL = "oil"
    LIQUID = "liquid"
    FLOUR = "flour"
    SUGAR = "sugar"
    BAKING_AGENT = "bakingAgent"
    SALT = "salt"
    OTHER = "other"


class Ingredient(BaseModel):
    """A single ingredient line of a recipe."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(description="Name of the ingredient (e.g. 'fresh basil')")
    amount: str = Field(
        default="",
        description="Free-form quantity ('1', '1/2', '1 1/2', 'to taste', or empty)"
    )
    unit: Optional[str] = Field(
        default=None,
        description="Unit of measurement (cup, tablespoons, clove, ...)"
    )
    optional: bool = Field(
        default=False,
        description="Set by the scaling engine when the scaled amount is too small to matter"
    )


class Recipe(BaseModel):
    """A recipe as produced by a recipe source."""

    model_config = ConfigDict(frozen=True)

    title: str = Field(description="Name of the recipe")
    sourceUrl: Optional[str] = Field(default=None, description="Page the recipe came from")
    servings: Optional[Union[int, float]] = Field(
        default=None,
        description="Number of portions the recipe yields"
    )
    ingredients: List[Ingredient] = Field(default=[], description="Ingredients, in recipe order")
    steps: List[str] = Field(default=[], description="Ordered preparation steps")
    estimatedTimeMinutes: Optional[float] = Field(
        default=None,
        description="Estimated total time in minutes"
    )

    def without_ingredient(self, index: int) -> "Recipe":
        """Return a copy of the recipe with the ingredient at `index` removed."""
        if not 0 <= index < len(self.ingredients):
            raise IndexError(f"No ingredient at index {index}")
        ingredients = [ing for i, ing in enumerate(self.ingredients) if i != index]
        return self.model_copy(update={"ingredients": ingredients})

    def without_optional_ingredients(self) -> "Recipe":
        """Return a copy of the recipe keeping only the non-optional ingredients."""
        ingredients = [ing for ing in self.ingredients if not ing.optional]
        return self.model_copy(update={"ingredients": ingredients})


class ConvertedRecipe(Recipe):
    """A recipe scaled to a target serving count, with cooking caveats."""

    warnings: Optional[List[str]] = Field(
        default=None,
        description="Deduplicated caveats for the cook, omitted when there are none"
    )
