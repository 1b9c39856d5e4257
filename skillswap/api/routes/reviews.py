"""
Review routes.
"""
from fastapi import APIRouter, Depends, status

from skillswap.api.deps import get_actor_session, get_authenticated_session
from skillswap.core.actor import ActorSession
from skillswap.schemas.base import MessageResponse
from skillswap.schemas.review import ReviewForm, ReviewsPage
from skillswap.services.review_service import ReviewService

router = APIRouter(prefix="/reviews", tags=["reviews"])

review_service = ReviewService()


@router.get("", response_model=ReviewsPage)
async def get_reviews(session: ActorSession = Depends(get_actor_session)):
    """Reviews received, and which swaps can be reviewed."""
    return await review_service.reviews_page(session)


@router.post("", response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
async def submit_review(
    form: ReviewForm,
    session: ActorSession = Depends(get_authenticated_session),
):
    """Review a completed swap."""
    return await review_service.submit_review(session, form)
