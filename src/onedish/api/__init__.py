"""HTTP API for recipe conversion."""

from .router import router

__all__ = ["router"]
