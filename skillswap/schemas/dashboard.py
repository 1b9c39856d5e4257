"""
Dashboard schemas.
"""
from typing import List, Optional

from skillswap.schemas.base import BaseSchema
from skillswap.schemas.profile import ProfileView, UserCard


class DashboardStats(BaseSchema):
    """Quick stats row."""

    available_matches: int = 0
    pending_requests: int = 0
    completed_swaps: int = 0


class DashboardResponse(BaseSchema):
    """
    Dashboard view.

    needs_profile_setup is set when the actor has no profile for the caller;
    the client then opens the profile setup dialog instead of the dashboard.
    """

    needs_profile_setup: bool = False
    profile: Optional[ProfileView] = None
    stats: DashboardStats = DashboardStats()
    suggested_matches: List[UserCard] = []
