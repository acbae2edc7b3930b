"""API v1: goal and program endpoints."""

from fastapi import APIRouter

from .goals import router as goals_router
from .programs import router as programs_router

router = APIRouter(prefix="/api/v1", tags=["api_v1"])
router.include_router(goals_router)
router.include_router(programs_router)

api_v1_router = router
