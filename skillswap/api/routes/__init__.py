"""
API Routes package.
"""
from fastapi import APIRouter

from skillswap.schemas.base import ErrorResponse
from skillswap.api.routes.health import router as health_router
from skillswap.api.routes.profile import router as profile_router
from skillswap.api.routes.dashboard import router as dashboard_router
from skillswap.api.routes.users import router as users_router
from skillswap.api.routes.requests import router as requests_router
from skillswap.api.routes.reviews import router as reviews_router

# Error envelope rendered by the APIException handler
ERROR_RESPONSES = {
    401: {"model": ErrorResponse, "description": "Caller principal missing"},
    404: {"model": ErrorResponse, "description": "Profile or swap request not found"},
    409: {"model": ErrorResponse, "description": "Swap request state conflict"},
    502: {"model": ErrorResponse, "description": "Actor gateway unavailable"},
}

# Main API router
api_router = APIRouter(responses=ERROR_RESPONSES)

# Include all routers
api_router.include_router(health_router)
api_router.include_router(profile_router)
api_router.include_router(dashboard_router)
api_router.include_router(users_router)
api_router.include_router(requests_router)
api_router.include_router(reviews_router)

__all__ = [
    "api_router",
    "health_router",
    "profile_router",
    "dashboard_router",
    "users_router",
    "requests_router",
    "reviews_router",
]
