"""
User directory routes.

Thin controllers - all business logic lives in DirectoryService.
"""
from typing import List

from fastapi import APIRouter, Depends, Query

from skillswap.api.deps import get_actor_session
from skillswap.core.actor import ActorSession
from skillswap.schemas.directory import DirectoryPage, DirectoryQuery, SortKey
from skillswap.schemas.profile import UserCard
from skillswap.services.directory_service import DirectoryService

router = APIRouter(prefix="/users", tags=["users"])

directory_service = DirectoryService()


@router.get("", response_model=DirectoryPage)
async def search_directory(
    q: str = Query("", description="Name or skill"),
    location: str = Query("", description="Location contains"),
    sort: SortKey = Query(SortKey.RATING),
    session: ActorSession = Depends(get_actor_session),
):
    """Search page: filter the directory by text and location, then sort."""
    return await directory_service.search(
        session,
        DirectoryQuery(q=q, location=location, sort=sort),
    )


@router.get("/matches", response_model=List[UserCard])
async def list_matches(session: ActorSession = Depends(get_actor_session)):
    """Users who want the caller's skills and offer skills the caller wants."""
    return await directory_service.matches(session)


@router.get("/search", response_model=List[UserCard])
async def search_by_skill(
    skill: str = Query(..., min_length=1),
    session: ActorSession = Depends(get_actor_session),
):
    """Users offering a skill, as matched by the actor."""
    return await directory_service.search_by_skill(session, skill)


@router.get("/{user_id}", response_model=UserCard)
async def get_user(
    user_id: str,
    session: ActorSession = Depends(get_actor_session),
):
    """A single user's card."""
    return await directory_service.get_user(session, user_id)
