"""
Profile service - the caller's own profile.

Profile setup and edit both end in saveCallerUserProfile; the existing
average rating is carried over because the form never edits it.
"""
from skillswap.core.actor import ActorSession
from skillswap.core.exceptions import ProfileNotFoundException, UnauthorizedException
from skillswap.repositories.profile_repository import ProfileRepository
from skillswap.schemas.base import MessageResponse
from skillswap.schemas.profile import ProfileForm, ProfileView
from skillswap.services.formatting import to_profile_view


class ProfileService:
    """Handles reading and saving the caller's profile."""

    def __init__(self):
        self.profile_repo = ProfileRepository()

    async def get_caller_profile(self, session: ActorSession) -> ProfileView:
        """
        Raises:
            ProfileNotFoundException: If the caller has not set up a profile.
        """
        profile = await self.profile_repo.get_caller_profile(session)
        if profile is None:
            raise ProfileNotFoundException()
        return to_profile_view(profile)

    async def save_profile(self, session: ActorSession, form: ProfileForm) -> MessageResponse:
        """Create the caller's profile, or replace it keeping the rating."""
        if not session.principal:
            raise UnauthorizedException("Authentication required")

        existing = await self.profile_repo.get_caller_profile(session)
        profile = form.to_profile(average_rating=existing.average_rating if existing else 0.0)
        await self.profile_repo.save_caller_profile(session, profile)

        return MessageResponse(message="Profile updated!" if existing else "Profile created!")

    async def update_profile(self, session: ActorSession, form: ProfileForm) -> MessageResponse:
        """Update the fields of an existing profile."""
        if not session.principal:
            raise UnauthorizedException("Authentication required")

        await self.profile_repo.update_caller_profile(session, form)
        return MessageResponse(message="Profile updated!")
