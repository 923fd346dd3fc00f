"""
Sample recipes bundled with the package.

Used by the sample recipe source and the CLI so the app can be tried without
a real extractor.
"""

from typing import Any, Dict, Optional

from .models.recipe import Recipe

SAMPLE_RECIPES: Dict[str, Dict[str, Any]] = {
    "greek-salad": {
        "title": "Greek Salad",
        "servings": 4,
        "ingredients": [
            {"name": "cucumber", "amount": "1", "unit": "large"},
            {"name": "tomatoes", "amount": "3", "unit": "medium"},
            {"name": "red onion", "amount": "1/2", "unit": "medium"},
            {"name": "green bell pepper", "amount": "1", "unit": "small"},
            {"name": "kalamata olives", "amount": "1/2", "unit": "cup"},
            {"name": "feta cheese", "amount": "3/4", "unit": "cup"},
            {"name": "extra-virgin olive oil", "amount": "1/4", "unit": "cup"},
            {"name": "red wine vinegar", "amount": "2", "unit": "tablespoons"},
            {"name": "garlic", "amount": "1", "unit": "clove"},
            {"name": "dried oregano", "amount": "1", "unit": "teaspoon"},
            {"name": "sea salt", "amount": "to taste"},
            {"name": "black pepper", "amount": "to taste"},
        ],
        "steps": [
            "Chop the cucumber, tomatoes, bell pepper, and red onion into bite-sized pieces.",
            "Add the chopped vegetables to a large bowl along with the olives.",
            "Whisk together the olive oil, red wine vinegar, minced garlic, oregano, salt, and pepper.",
            "Pour the dressing over the vegetables and toss gently to combine.",
            "Top with crumbled feta just before serving.",
        ],
        "estimatedTimeMinutes": 20,
    },
    "one-pan-salmon": {
        "title": "One-Pan Salmon and Vegetables",
        "servings": 4,
        "ingredients": [
            {"name": "salmon fillets", "amount": "4", "unit": "pieces"},
            {"name": "broccoli florets", "amount": "3", "unit": "cups"},
            {"name": "carrots", "amount": "3", "unit": "medium"},
            {"name": "red onion", "amount": "1", "unit": "medium"},
            {"name": "olive oil", "amount": "3", "unit": "tablespoons"},
            {"name": "garlic", "amount": "3", "unit": "cloves"},
            {"name": "lemon", "amount": "1", "unit": "whole"},
            {"name": "sea salt", "amount": "to taste"},
            {"name": "black pepper", "amount": "to taste"},
            {"name": "dried herbs (e.g. thyme or Italian seasoning)", "amount": "2", "unit": "teaspoons"},
        ],
        "steps": [
            "Preheat the oven to 400°F (200°C). Line a large sheet pan with parchment paper.",
            "Chop the broccoli, carrots, and red onion into bite-sized pieces and spread them on the sheet pan.",
            "Drizzle the vegetables with olive oil, minced garlic, salt, pepper, and dried herbs. Toss to coat and spread in an even layer.",
            "Nestle the salmon fillets among the vegetables. Drizzle the salmon with a little more olive oil and season with salt, pepper, and herbs.",
            "Slice the lemon and place slices over the salmon and/or vegetables.",
            "Bake for 15–20 minutes, or until the salmon is cooked through and the vegetables are tender.",
        ],
        "estimatedTimeMinutes": 30,
    },
}

DEFAULT_SAMPLE = "greek-salad"


def get_sample_recipe(key: str, url: Optional[str] = None) -> Recipe:
    """
    Build a fresh Recipe from a bundled sample.

    Args:
        key: Sample key (see SAMPLE_RECIPES)
        url: Optional source URL to record on the recipe

    Raises:
        KeyError: if no sample has this key
    """
    if key not in SAMPLE_RECIPES:
        raise KeyError(f"Unknown sample recipe: {key}")
    return Recipe.model_validate({**SAMPLE_RECIPES[key], "sourceUrl": url})
