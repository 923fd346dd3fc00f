"""
Recipe sources: where recipes come from before they are scaled.

Real extraction (fetching a page, reading its schema.org JSON-LD, or asking a
language model) lives outside this package. A source only has to return a
`Recipe`, or raise `ExtractionFailedError`.
"""

import logging
from abc import ABC, abstractmethod
from typing import Dict

from .exceptions import ExtractionFailedError
from .models.recipe import Recipe
from .samples import DEFAULT_SAMPLE, get_sample_recipe

logger = logging.getLogger(__name__)


class RecipeSource(ABC):
    """Turns a recipe URL into a Recipe."""

    @abstractmethod
    def get_recipe(self, url: str) -> Recipe:
        """
        Acquire the recipe published at `url`.

        Raises:
            ExtractionFailedError: if no recipe could be acquired
        """


class SampleRecipeSource(RecipeSource):
    """Serves bundled sample recipes, picked from the URL."""

    # URL fragment -> sample key, first match wins
    URL_ROUTES: Dict[str, str] = {
        "one-pan-meal-salmon-and-vegetables": "one-pan-salmon",
        "greek-salad": "greek-salad",
    }

    def get_recipe(self, url: str) -> Recipe:
        if not url or not url.strip():
            raise ExtractionFailedError("No URL given to extract a recipe from.", url=url)

        for fragment, key in self.URL_ROUTES.items():
            if fragment in url:
                logger.info(f"Serving sample recipe '{key}' for {url}")
                return get_sample_recipe(key, url=url)

        logger.info(f"No sample matches {url}, falling back to '{DEFAULT_SAMPLE}'")
        return get_sample_recipe(DEFAULT_SAMPLE, url=url)
