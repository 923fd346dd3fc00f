"""
Ingredient categorization by keyword.

Categories are checked in a fixed order and the first matching keyword group
wins, so "garlic powder" is garlic (not spice) and "lemon juice" is
lemonLime (not liquid).
"""

import logging
import re
from typing import Iterable, List, Tuple

from ..models.recipe import IngredientCategory

logger = logging.getLogger(__name__)

# Terms whose spelling contains another group's keyword ("eggplant" -> "egg")
MASKED_TERMS: Tuple[str, ...] = (
    "eggplant",
    "veggie",
    "bell pepper",
    "salted",
    "sausage",
    "watercress",
    "watermelon",
    "boiled",
)

CATEGORY_KEYWORDS: List[Tuple[IngredientCategory, Tuple[str, ...]]] = [
    (IngredientCategory.EGG, ("egg", "yolk")),
    # Checked before lemonLime, which would match its "lemon"
    (IngredientCategory.HERB, ("lemongrass",)),
    (IngredientCategory.LEMON_LIME, ("lemon", "lime")),
    (IngredientCategory.ONION, ("onion", "shallot", "scallion", "leek")),
    (IngredientCategory.GARLIC, ("garlic",)),
    (IngredientCategory.HERB, (
        "herb", "basil", "parsley", "cilantro", "mint", "dill", "thyme",
        "rosemary", "oregano", "sage", "tarragon", "chive", "bay lea",
        "marjoram",
    )),
    (IngredientCategory.SPICE, (
        "spice", "black pepper", "white pepper", "ground pepper", "peppercorn",
        "pepper flakes", "paprika", "cumin", "cinnamon", "nutmeg", "turmeric",
        "cayenne", "chili powder", "chilli", "chile flakes", "ginger", "clove",
        "cardamom", "coriander", "garam masala", "curry powder", "saffron",
        "seasoning", "fennel seed", "mustard seed",
    )),
    (IngredientCategory.OIL, ("oil", "ghee", "lard", "shortening")),
    (IngredientCategory.LIQUID, (
        "water", "milk", "cream", "yogurt", "yoghurt", "stock", "broth",
        "wine", "vinegar", "juice", "sauce", "beer", "cider", "sake", "mirin",
        "worcestershire",
    )),
    (IngredientCategory.FLOUR, ("flour",)),
    (IngredientCategory.SUGAR, ("sugar",)),
    (IngredientCategory.BAKING_AGENT, (
        "baking powder", "baking soda", "bicarbonate of soda", "yeast",
    )),
    (IngredientCategory.SALT, ("salt",)),
]

BAKING_DISH_KEYWORDS: Tuple[str, ...] = (
    "cake", "cupcake", "cheesecake", "cookie", "brownie", "blondie", "muffin",
    "bread", "loaf", "brioche", "focaccia", "pie", "tart", "scone", "biscuit",
    "pastry", "pastries", "croissant", "cobbler", "crumble", "shortbread",
    "loaves",
)

BAKING_SIGNAL_KEYWORDS: Tuple[str, ...] = (
    "flour", "sugar", "butter", "baking powder", "baking soda", "yeast",
    "cocoa", "vanilla",
)

_BAKING_DISH_RE = re.compile(
    r"\b(?:" + "|".join(re.escape(kw) for kw in BAKING_DISH_KEYWORDS) + r")s?\b"
)


def _normalize(text: str) -> str:
    """Lowercase `text` and blank out masked terms."""
    normalized = text.lower()
    for term in MASKED_TERMS:
        normalized = normalized.replace(term, " ")
    return normalized


def categorize(name: str) -> IngredientCategory:
    """Return the scaling category of an ingredient from its name."""
    normalized = _normalize(name or "")
    for category, keywords in CATEGORY_KEYWORDS:
        if any(kw in normalized for kw in keywords):
            return category
    return IngredientCategory.OTHER


def count_baking_signals(ingredient_names: Iterable[str]) -> int:
    """Count the distinct baking signal keywords found among ingredient names."""
    combined = " | ".join(_normalize(name or "") for name in ingredient_names)
    return sum(1 for kw in BAKING_SIGNAL_KEYWORDS if kw in combined)


def is_baking_title(title: str) -> bool:
    """Whether the title names a baked good (whole-word match, plural allowed)."""
    return bool(_BAKING_DISH_RE.search((title or "").lower()))


def is_baking_recipe(title: str, ingredient_names: Iterable[str]) -> bool:
    """
    Detect baking recipes, whose texture and rise suffer from steep downscaling.

    A recipe is baking when its title names a baked good, or when at least two
    distinct baking signals (flour, sugar, butter, leavening, ...) appear among
    its ingredients.
    """
    if is_baking_title(title):
        logger.debug(f"Baking dish keyword found in title '{title}'")
        return True
    signals = count_baking_signals(ingredient_names)
    logger.debug(f"Found {signals} baking signal(s) among ingredients of '{title}'")
    return signals >= 2
