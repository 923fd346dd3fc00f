"""Exceptions for the onedish package."""

from typing import Optional


class OneDishError(Exception):
    """Base class for all onedish errors."""
    pass


class MissingIngredientsError(OneDishError, ValueError):
    """Raised when a recipe has no ingredients to scale."""

    def __init__(self, message: str = "Recipe has no ingredients to convert."):
        super().__init__(message)


class ExtractionFailedError(OneDishError):
    """Raised when a recipe could not be acquired from its source."""

    def __init__(self, message: str, url: Optional[str] = None):
        super().__init__(message)
        self.url = url
