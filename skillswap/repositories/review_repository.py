"""
Review repository.
"""
from typing import List, Optional

from skillswap.core.actor import ActorSession
from skillswap.repositories.base import BaseRepository
from skillswap.repositories.profile_repository import CALLER_PROFILE
from skillswap.schemas.review import Review

REVIEWS = "reviews"


class ReviewRepository(BaseRepository[Review]):
    """Review reads and submission."""

    def __init__(self):
        super().__init__(Review)

    async def for_user(self, session: ActorSession, user_id: Optional[str]) -> List[Review]:
        """Reviews where user_id is the reviewee."""
        if not user_id:
            return []

        async def fetch():
            payload = await session.client.get_reviews_for_user(session.principal, user_id)
            return self.decode_many("getReviewsForUser", payload)

        return await self._read(session, (REVIEWS, user_id), fetch)

    async def submit(
        self,
        session: ActorSession,
        *,
        swap_request_id: int,
        rating: int,
        comment: Optional[str],
    ) -> None:
        await session.client.submit_review(
            session.principal,
            swap_request_id=swap_request_id,
            rating=rating,
            comment=comment,
        )
        self._invalidate(session, REVIEWS, CALLER_PROFILE)
