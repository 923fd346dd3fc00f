"""
Recipe scaling engine.

Scales every parseable ingredient amount by targetServings / servings, then
applies the rounding policy of the ingredient's category so the result is
something a cook can actually measure (whole eggs, half lemons, at least a
quarter teaspoon of a spice...). Policies also decide when an ingredient
becomes optional and which caveats the cook should read.

Unparseable amounts ("to taste") are never altered.
"""

import logging
import math
from dataclasses import dataclass
from typing import Dict, List, Literal, Mapping, Optional, Tuple, Union

from ..constants import (
    BAKING_CAUTION_FACTOR,
    DEFAULT_TARGET_SERVINGS,
    STRUCTURAL_WARNING_RATIO,
)
from ..exceptions import MissingIngredientsError
from ..models.recipe import ConvertedRecipe, Ingredient, IngredientCategory, Recipe
from .amounts import format_amount, is_close, parse_amount, round_to_step
from .categorizer import categorize, is_baking_recipe

logger = logging.getLogger(__name__)

Number = Union[int, float]

BAKING_CAUTION_WARNING = (
    "This looks like a baking recipe. Scaling it down this much can change its "
    "texture and rise, so consider making a half batch instead."
)
EGG_WARNING = (
    "Egg amounts were rounded to whole eggs. If that is too much, beat the egg "
    "and use only part of it."
)
LEMON_LIME_WARNING = "Lemon and lime amounts were rounded to the nearest half fruit."
ONION_WARNING = "Onion amounts were rounded to the nearest quarter onion."
GARLIC_WARNING = "Garlic was rounded to whole cloves."
HERB_WARNING = "{name} is only a small amount at this size, so it is marked optional."
SPICE_WARNING = "{name} is only a pinch at this size, so it is marked optional. Season to taste."
MINIMUM_AMOUNT_WARNING = (
    "{name} was rounded up to a practical minimum. Use a little less if you prefer."
)
STRUCTURAL_WARNING = (
    "{name} was scaled to less than a quarter of the original amount, which can "
    "affect how the dish sets or rises."
)

WarnRule = Literal["never", "rounded", "optional", "below_floor", "structural"]


@dataclass(frozen=True)
class CategoryPolicy:
    """How scaled amounts of one ingredient category are rounded and reported."""
    step: float
    floor: Optional[float] = None
    optional_below: Optional[float] = None
    warn: WarnRule = "never"
    message: Optional[str] = None

    def should_warn(self, parsed: float, scaled: float, final: float, optional: bool) -> bool:
        if self.warn == "rounded":
            return not is_close(final, scaled)
        if self.warn == "optional":
            return optional
        if self.warn == "below_floor":
            return self.floor is not None and 0 < scaled < self.floor
        if self.warn == "structural":
            return scaled < parsed * STRUCTURAL_WARNING_RATIO
        return False


_MINIMUM_POLICY = CategoryPolicy(step=0.5, floor=0.5, warn="below_floor", message=MINIMUM_AMOUNT_WARNING)
_STRUCTURAL_POLICY = CategoryPolicy(step=0.25, floor=0.25, warn="structural", message=STRUCTURAL_WARNING)
_PLAIN_POLICY = CategoryPolicy(step=0.25)

DEFAULT_POLICIES: Dict[IngredientCategory, CategoryPolicy] = {
    IngredientCategory.EGG: CategoryPolicy(step=1, floor=1, warn="rounded", message=EGG_WARNING),
    IngredientCategory.LEMON_LIME: CategoryPolicy(step=0.5, floor=0.5, warn="rounded", message=LEMON_LIME_WARNING),
    IngredientCategory.ONION: CategoryPolicy(step=0.25, floor=0.25, warn="rounded", message=ONION_WARNING),
    IngredientCategory.GARLIC: CategoryPolicy(step=1, floor=1, warn="rounded", message=GARLIC_WARNING),
    IngredientCategory.HERB: CategoryPolicy(
        step=0.25, floor=0.25, optional_below=0.5, warn="optional", message=HERB_WARNING
    ),
    IngredientCategory.SPICE: CategoryPolicy(
        step=0.25, floor=0.25, optional_below=0.25, warn="optional", message=SPICE_WARNING
    ),
    IngredientCategory.OIL: _MINIMUM_POLICY,
    IngredientCategory.LIQUID: _MINIMUM_POLICY,
    IngredientCategory.FLOUR: _STRUCTURAL_POLICY,
    IngredientCategory.SUGAR: _STRUCTURAL_POLICY,
    IngredientCategory.BAKING_AGENT: _STRUCTURAL_POLICY,
    IngredientCategory.SALT: _PLAIN_POLICY,
    IngredientCategory.OTHER: _PLAIN_POLICY,
}


def resolve_servings(value: Optional[Number], default: Number = DEFAULT_TARGET_SERVINGS) -> Number:
    """Return `value` when it is a positive finite number, `default` otherwise."""
    try:
        number = float(value)
    except (TypeError, ValueError):
        return default
    if isinstance(value, bool) or not math.isfinite(number) or number <= 0:
        return default
    return int(number) if number.is_integer() else number


class RecipeScaler:
    """Converts recipes to a target serving count using per-category policies."""

    def __init__(self, policies: Optional[Mapping[IngredientCategory, CategoryPolicy]] = None):
        self.policies = dict(DEFAULT_POLICIES)
        if policies:
            self.policies.update(policies)

    def scale_ingredient(self, ingredient: Ingredient, factor: float) -> Tuple[Ingredient, Optional[str]]:
        """
        Scale one ingredient and apply its category policy.

        Args:
            ingredient: The source ingredient (left untouched)
            factor: Target servings divided by original servings

        Returns:
            The new ingredient and the warning it produced, if any
        """
        parsed = parse_amount(ingredient.amount)
        category = categorize(ingredient.name)
        policy = self.policies[category]
        scaled = parsed * factor if parsed is not None else None

        # Too large to round in steps or quarters counts as unparseable
        if scaled is None or not all(math.isfinite(v) for v in (scaled / policy.step, scaled * 4)):
            logger.debug(f"Keeping unparseable amount '{ingredient.amount}' for '{ingredient.name}'")
            return ingredient.model_copy(update={"optional": False}), None

        final = round_to_step(scaled, policy.step)
        if policy.floor is not None and scaled > 0:
            final = max(final, policy.floor)
        optional = policy.optional_below is not None and scaled < policy.optional_below

        warning = None
        if policy.message and policy.should_warn(parsed, scaled, final, optional):
            warning = policy.message.format(name=ingredient.name)

        logger.debug(
            f"'{ingredient.name}' ({category.value}): {parsed} -> {scaled:.3f} -> {final}"
            f"{' (optional)' if optional else ''}"
        )
        scaled_ingredient = Ingredient(
            name=ingredient.name,
            amount=format_amount(final),
            unit=ingredient.unit,
            optional=optional,
        )
        return scaled_ingredient, warning

    def convert(self, recipe: Recipe, target_servings: Optional[Number]) -> ConvertedRecipe:
        """
        Convert a recipe to `target_servings` portions.

        A missing or non-positive target falls back to one serving, and a recipe
        without servings is treated as serving one.

        Raises:
            MissingIngredientsError: if the recipe has no ingredients
        """
        if not recipe.ingredients:
            raise MissingIngredientsError(f"Recipe '{recipe.title}' has no ingredients to convert.")

        target = resolve_servings(target_servings)
        if target != target_servings:
            logger.warning(f"Invalid target servings {target_servings!r}, using {target}")
        original = resolve_servings(recipe.servings, default=1)
        factor = target / original
        logger.info(f"Converting '{recipe.title}' from {original} to {target} servings (factor {factor:.3f})")

        warnings: Dict[str, None] = {}
        names = [ing.name for ing in recipe.ingredients]
        if factor < BAKING_CAUTION_FACTOR and is_baking_recipe(recipe.title, names):
            warnings[BAKING_CAUTION_WARNING] = None

        ingredients: List[Ingredient] = []
        for ingredient in recipe.ingredients:
            scaled_ingredient, warning = self.scale_ingredient(ingredient, factor)
            ingredients.append(scaled_ingredient)
            if warning:
                warnings.setdefault(warning, None)

        logger.info(f"Converted {len(ingredients)} ingredients with {len(warnings)} warning(s)")
        return ConvertedRecipe(
            title=recipe.title,
            sourceUrl=recipe.sourceUrl,
            servings=target,
            ingredients=ingredients,
            steps=list(recipe.steps),
            estimatedTimeMinutes=recipe.estimatedTimeMinutes,
            warnings=list(warnings) or None,
        )


_default_scaler = RecipeScaler()


def convert_recipe(recipe: Recipe, target_servings: Optional[Number]) -> ConvertedRecipe:
    """Convert a recipe with the default category policies."""
    return _default_scaler.convert(recipe, target_servings)
