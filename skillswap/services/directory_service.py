"""
Directory service - search page, matches and single-user lookups.
"""
from typing import List

from skillswap.core.actor import ActorSession
from skillswap.core.config import settings
from skillswap.core.exceptions import ProfileNotFoundException
from skillswap.repositories.profile_repository import ProfileRepository
from skillswap.schemas.directory import DirectoryPage, DirectoryQuery
from skillswap.schemas.profile import UserCard
from skillswap.services.directory_filter import apply_directory_pipeline
from skillswap.services.formatting import results_summary, to_user_card


class DirectoryService:
    """Handles user discovery."""

    def __init__(self):
        self.profile_repo = ProfileRepository()

    async def search(self, session: ActorSession, query: DirectoryQuery) -> DirectoryPage:
        """First directory page, filtered and sorted for the search bar."""
        users = await self.profile_repo.list_users(session, 0, settings.directory_page_size)
        results = apply_directory_pipeline(users, query.q, query.location, query.sort)

        return DirectoryPage(
            query=query,
            count=len(results),
            summary=results_summary(len(results)),
            users=[to_user_card(profile) for profile in results],
        )

    async def matches(self, session: ActorSession) -> List[UserCard]:
        profiles = await self.profile_repo.find_matches(session)
        return [to_user_card(profile) for profile in profiles]

    async def search_by_skill(self, session: ActorSession, skill_name: str) -> List[UserCard]:
        profiles = await self.profile_repo.search_by_skill(session, skill_name.strip())
        return [to_user_card(profile) for profile in profiles]

    async def get_user(self, session: ActorSession, user_id: str) -> UserCard:
        """
        Raises:
            ProfileNotFoundException: If the actor has no profile for user_id.
        """
        profile = await self.profile_repo.get_user_profile(session, user_id)
        if profile is None:
            raise ProfileNotFoundException()
        return to_user_card(profile)
