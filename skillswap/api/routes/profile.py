"""
Caller profile routes.
"""
from fastapi import APIRouter, Depends

from skillswap.api.deps import get_actor_session, get_authenticated_session
from skillswap.core.actor import ActorSession
from skillswap.schemas.base import MessageResponse
from skillswap.schemas.profile import ProfileForm, ProfileView
from skillswap.services.profile_service import ProfileService

router = APIRouter(prefix="/profile", tags=["profile"])

profile_service = ProfileService()


@router.get("/me", response_model=ProfileView)
async def get_my_profile(session: ActorSession = Depends(get_actor_session)):
    """Get the caller's profile; 404 until it has been set up."""
    return await profile_service.get_caller_profile(session)


@router.put("/me", response_model=MessageResponse)
async def save_my_profile(
    form: ProfileForm,
    session: ActorSession = Depends(get_authenticated_session),
):
    """Create or replace the caller's profile (profile setup dialog)."""
    return await profile_service.save_profile(session, form)


@router.patch("/me", response_model=MessageResponse)
async def update_my_profile(
    form: ProfileForm,
    session: ActorSession = Depends(get_authenticated_session),
):
    """Update the caller's profile fields."""
    return await profile_service.update_profile(session, form)
