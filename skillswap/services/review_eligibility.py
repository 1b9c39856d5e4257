"""
Review eligibility - which swaps may be picked in the submit-review dialog.
"""
from typing import Any, Iterable, List, Optional

from skillswap.schemas.review import EligibleSwap, ReviewEligibility
from skillswap.schemas.swap import SwapRequest, SwapStatus
from skillswap.services.request_classifier import coerce_swap_requests

NO_COMPLETED_SWAPS = "No completed swaps"


def select_reviewable_swaps(items: Optional[Iterable[Any]]) -> List[SwapRequest]:
    """Completed swaps, in input order. Malformed records are skipped; callers report them."""
    requests, _ = coerce_swap_requests(items)
    return [r for r in requests if r.status is SwapStatus.COMPLETED]


def build_eligibility(items: Optional[Iterable[Any]]) -> ReviewEligibility:
    """
    Dialog state for a new review.

    An empty candidate set disables submission with an explicit message.
    Already-reviewed swaps are not filtered out here.
    """
    candidates = [
        EligibleSwap(
            id=swap.id,
            label=f"{swap.skill_offered} ↔ {swap.skill_wanted}",
            skill_offered=swap.skill_offered,
            skill_wanted=swap.skill_wanted,
            session_time=swap.session_time,
        )
        for swap in select_reviewable_swaps(items)
    ]

    if not candidates:
        return ReviewEligibility(candidates=[], can_submit=False, empty_message=NO_COMPLETED_SWAPS)

    return ReviewEligibility(candidates=candidates, can_submit=True)
