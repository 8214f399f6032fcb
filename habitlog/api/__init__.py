from fastapi import APIRouter

from habitlog.api.page import router as page_router
from habitlog.api.routes import router as habits_router

router = APIRouter()
router.include_router(habits_router)
router.include_router(page_router)

__all__ = ["router"]
