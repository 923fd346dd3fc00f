from typing import Any, List, Optional
from pydantic import BaseModel


class ConvertRecipeRequest(BaseModel):
    # Validated by the route so malformed input maps to 400 rather than 422
    recipe: Optional[Any] = None
    targetServings: Optional[Any] = None


class ParseUrlRequest(BaseModel):
    url: Optional[str] = None


class ServingChoicesResponse(BaseModel):
    choices: List[int]
    default: int
