from fastapi import APIRouter

from ...constants import DEFAULT_TARGET_SERVINGS, SERVING_CHOICES
from ..schemas import ServingChoicesResponse

router = APIRouter()


@router.get("/api/serving-choices", response_model=ServingChoicesResponse)
async def get_serving_choices():
    default = DEFAULT_TARGET_SERVINGS if DEFAULT_TARGET_SERVINGS in SERVING_CHOICES else SERVING_CHOICES[0]
    return {"choices": SERVING_CHOICES, "default": default}
