"""Main router module."""
from fastapi import APIRouter

from .routes.constants import router as constants_router
from .routes.convert import router as convert_router
from .routes.parse_url import router as parse_url_router

router = APIRouter()

router.include_router(convert_router)
router.include_router(parse_url_router)
router.include_router(constants_router)
