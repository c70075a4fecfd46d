"""API router initialization."""

from fastapi import APIRouter
from loguru import logger

from user_service.api.users import router as users_router
from user_service.api.version import router as version_router

# Create main API router
router = APIRouter()

# Mount API endpoints
router.include_router(users_router, tags=["users"])
router.include_router(version_router)

logger.debug("API router initialized (users, version routers mounted)")
