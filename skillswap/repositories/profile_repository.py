"""
Profile repository - profile, directory and match queries.
"""
from typing import List, Optional

from skillswap.core.actor import ActorSession
from skillswap.repositories.base import BaseRepository
from skillswap.schemas.profile import ProfileForm, UserProfile

CALLER_PROFILE = "callerProfile"
USER_PROFILE = "userProfile"
ALL_USERS = "allUsers"
MATCHES = "matches"
SEARCH_USERS = "searchUsers"


class ProfileRepository(BaseRepository[UserProfile]):
    """Profile reads and writes against the actor."""

    def __init__(self):
        super().__init__(UserProfile)

    async def get_caller_profile(self, session: ActorSession) -> Optional[UserProfile]:
        """Caller's own profile, None if they have not set one up (or are anonymous)."""
        if not session.principal:
            return None

        async def fetch():
            payload = await session.client.get_caller_user_profile(session.principal)
            return self.decode_one("getCallerUserProfile", payload)

        return await self._read(session, (CALLER_PROFILE, session.principal), fetch)

    async def get_user_profile(self, session: ActorSession, user_id: str) -> Optional[UserProfile]:
        async def fetch():
            payload = await session.client.get_user_profile(session.principal, user_id)
            profile = self.decode_one("getUserProfile", payload)
            if profile is not None and profile.principal is None:
                # The id we asked for is the profile's identity
                profile = profile.model_copy(update={"principal": user_id})
            return profile

        return await self._read(session, (USER_PROFILE, user_id), fetch)

    async def list_users(self, session: ActorSession, offset: int, limit: int) -> List[UserProfile]:
        async def fetch():
            payload = await session.client.list_users(session.principal, offset, limit)
            return self.decode_many("listUsers", payload)

        return await self._read(session, (ALL_USERS, offset, limit), fetch)

    async def find_matches(self, session: ActorSession) -> List[UserProfile]:
        """Users who want the caller's skills and offer what they want."""
        if not session.principal:
            return []

        async def fetch():
            payload = await session.client.find_matches(session.principal)
            return self.decode_many("findMatches", payload)

        return await self._read(session, (MATCHES, session.principal), fetch)

    async def search_by_skill(self, session: ActorSession, skill_name: str) -> List[UserProfile]:
        if not skill_name:
            return []

        async def fetch():
            payload = await session.client.search_users_by_skill(session.principal, skill_name)
            return self.decode_many("searchUsersBySkill", payload)

        return await self._read(session, (SEARCH_USERS, skill_name), fetch)

    async def save_caller_profile(self, session: ActorSession, profile: UserProfile) -> None:
        """Create or replace the caller's profile."""
        payload = profile.model_dump(by_alias=True, exclude={"principal"})
        await session.client.save_caller_user_profile(session.principal, payload)
        self._invalidate(session, CALLER_PROFILE)

    async def update_caller_profile(self, session: ActorSession, form: ProfileForm) -> None:
        """Field-wise profile update; the actor keeps the rating."""
        await session.client.update_profile(
            session.principal,
            name=form.name,
            email=str(form.email),
            location=form.location,
            skills_offered=[s.model_dump(by_alias=True) for s in form.skills_offered],
            skills_wanted=[s.model_dump(by_alias=True) for s in form.skills_wanted],
        )
        self._invalidate(session, CALLER_PROFILE)
