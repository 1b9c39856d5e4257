"""
Review schemas.
"""
from typing import List, Optional

from pydantic import Field, field_validator

from skillswap.schemas.base import BaseSchema
from skillswap.schemas.swap import MalformedSwapRequest


class Review(BaseSchema):
    """A review left for a completed swap."""

    swap_request_id: int
    rating: int = Field(..., ge=1, le=5)
    comment: Optional[str] = None
    reviewer: str
    reviewee: str


class ReviewForm(BaseSchema):
    """Submit-review dialog."""

    swap_request_id: int
    rating: int = Field(5, ge=1, le=5)
    comment: Optional[str] = None

    @field_validator("comment")
    @classmethod
    def _blank_comment_is_none(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return None
        return value.strip() or None


class EligibleSwap(BaseSchema):
    """A completed swap offered as a review target."""

    id: int
    label: str  # "Guitar ↔ Coding"
    skill_offered: str
    skill_wanted: str
    session_time: Optional[int] = None


class ReviewEligibility(BaseSchema):
    """What the submit-review dialog may offer."""

    candidates: List[EligibleSwap] = []
    can_submit: bool = False
    empty_message: Optional[str] = None


class ReviewCard(BaseSchema):
    """A received review."""

    swap_request_id: int
    rating: int
    comment: Optional[str] = None
    reviewer: str
    reviewer_short: str


class ReviewsPage(BaseSchema):
    """Reviews page: feedback received plus the review dialog state."""

    reviews: List[ReviewCard] = []
    eligibility: ReviewEligibility
    anomalies: List[MalformedSwapRequest] = []
