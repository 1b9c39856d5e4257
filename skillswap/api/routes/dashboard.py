"""
Dashboard routes.
"""
from fastapi import APIRouter, Depends

from skillswap.api.deps import get_actor_session
from skillswap.core.actor import ActorSession
from skillswap.schemas.dashboard import DashboardResponse
from skillswap.services.dashboard_service import DashboardService

router = APIRouter(prefix="/dashboard", tags=["dashboard"])

dashboard_service = DashboardService()


@router.get("", response_model=DashboardResponse)
async def get_dashboard(session: ActorSession = Depends(get_actor_session)):
    """Profile header, quick stats and suggested matches."""
    return await dashboard_service.dashboard(session)
