"""
Review service - reviews received and review submission.
"""
from skillswap.core.actor import ActorSession
from skillswap.core.exceptions import (
    NoCompletedSwapsException,
    SwapNotReviewableException,
    UnauthorizedException,
)
from skillswap.core.logging import get_logger
from skillswap.repositories.review_repository import ReviewRepository
from skillswap.repositories.swap_repository import SwapRepository
from skillswap.schemas.base import MessageResponse
from skillswap.schemas.review import Review, ReviewCard, ReviewForm, ReviewsPage
from skillswap.services.formatting import shorten
from skillswap.services.review_eligibility import build_eligibility, select_reviewable_swaps
from skillswap.services.swap_anomalies import read_swap_requests

logger = get_logger(__name__)


class ReviewService:
    """Handles the reviews page and new reviews."""

    def __init__(self):
        self.review_repo = ReviewRepository()
        self.swap_repo = SwapRepository()

    async def reviews_page(self, session: ActorSession) -> ReviewsPage:
        """Reviews the caller received, plus what they may review next."""
        reviews = await self.review_repo.for_user(session, session.principal)
        records = await self.swap_repo.list_mine(session)
        requests, anomalies = read_swap_requests(records, "reviews")

        return ReviewsPage(
            reviews=[self._to_card(review) for review in reviews],
            eligibility=build_eligibility(requests),
            anomalies=anomalies,
        )

    async def submit_review(self, session: ActorSession, form: ReviewForm) -> MessageResponse:
        """
        Review one of the caller's completed swaps.

        Whether a swap was already reviewed is left to the actor.

        Raises:
            NoCompletedSwapsException: The caller has nothing to review.
            SwapNotReviewableException: The chosen swap is not completed.
        """
        if not session.principal:
            raise UnauthorizedException("Authentication required")

        records = await self.swap_repo.list_mine(session)
        requests, _ = read_swap_requests(records, "reviews")
        reviewable = select_reviewable_swaps(requests)
        if not reviewable:
            raise NoCompletedSwapsException()
        if form.swap_request_id not in {swap.id for swap in reviewable}:
            raise SwapNotReviewableException(form.swap_request_id)

        await self.review_repo.submit(
            session,
            swap_request_id=form.swap_request_id,
            rating=form.rating,
            comment=form.comment,
        )
        logger.info("review_submitted", swap_request_id=form.swap_request_id, rating=form.rating)
        return MessageResponse(message="Review submitted successfully!")

    def _to_card(self, review: Review) -> ReviewCard:
        return ReviewCard(
            swap_request_id=review.swap_request_id,
            rating=review.rating,
            comment=review.comment,
            reviewer=review.reviewer,
            reviewer_short=shorten(review.reviewer, 20),
        )
