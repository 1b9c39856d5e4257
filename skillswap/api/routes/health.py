"""
Health check routes.
"""
from datetime import datetime, timezone

from fastapi import APIRouter, Request

from skillswap.schemas.base import BaseSchema

router = APIRouter(tags=["health"])


class HealthResponse(BaseSchema):
    """Health check response."""

    status: str
    timestamp: str
    checks: dict


@router.get("/health", response_model=HealthResponse)
async def health_check(request: Request):
    """
    Health check endpoint for monitoring.

    Reports "degraded" when the actor gateway cannot be reached; cached
    views keep being served in that state.
    """
    checks = {}

    if await request.app.state.actor.ping():
        checks["actor"] = "healthy"
    else:
        checks["actor"] = "unreachable"

    checks["query_cache_entries"] = len(request.app.state.query_cache)

    return HealthResponse(
        status="healthy" if checks["actor"] == "healthy" else "degraded",
        timestamp=datetime.now(timezone.utc).isoformat(),
        checks=checks,
    )
