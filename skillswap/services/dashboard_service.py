"""
Dashboard service - profile header, quick stats and suggested matches.
"""
from skillswap.core.actor import ActorSession
from skillswap.core.config import settings
from skillswap.repositories.profile_repository import ProfileRepository
from skillswap.repositories.swap_repository import SwapRepository
from skillswap.schemas.dashboard import DashboardResponse, DashboardStats
from skillswap.schemas.swap import SwapStatus
from skillswap.services.formatting import to_profile_view, to_user_card
from skillswap.services.swap_anomalies import read_swap_requests


class DashboardService:
    """Builds the dashboard view."""

    def __init__(self):
        self.profile_repo = ProfileRepository()
        self.swap_repo = SwapRepository()

    async def dashboard(self, session: ActorSession) -> DashboardResponse:
        profile = await self.profile_repo.get_caller_profile(session)
        if profile is None:
            return DashboardResponse(needs_profile_setup=True)

        matches = await self.profile_repo.find_matches(session)
        records = await self.swap_repo.list_mine(session)
        requests, _ = read_swap_requests(records, "dashboard")

        # Pending counts both directions, unlike the requests page tabs
        stats = DashboardStats(
            available_matches=len(matches),
            pending_requests=sum(1 for r in requests if r.status is SwapStatus.PENDING),
            completed_swaps=sum(1 for r in requests if r.status is SwapStatus.COMPLETED),
        )

        return DashboardResponse(
            profile=to_profile_view(profile),
            stats=stats,
            suggested_matches=[
                to_user_card(match) for match in matches[: settings.dashboard_match_limit]
            ],
        )
