import pytest

from skillswap.core.exceptions import NoCompletedSwapsException, SwapNotReviewableException
from skillswap.schemas.review import ReviewForm
from skillswap.services.review_service import ReviewService
from tests.conftest import ALICE, BOB


@pytest.fixture()
def service():
    return ReviewService()


@pytest.fixture()
def swaps(marketplace):
    marketplace.add_request(ALICE, BOB, status="completed", skill_offered="Guitar", skill_wanted="Coding")
    marketplace.add_request(ALICE, BOB, status="accepted", sessionTime=1792314000000)
    return marketplace


@pytest.mark.asyncio
async def test_reviews_page_lists_received_reviews_and_candidates(service, bob_session, swaps):
    swaps.reviews.append({
        "swapRequestId": 1,
        "rating": 4,
        "comment": "Patient and clear",
        "reviewer": ALICE,
        "reviewee": BOB,
    })

    page = await service.reviews_page(bob_session)

    assert [(r.rating, r.comment) for r in page.reviews] == [(4, "Patient and clear")]
    assert page.reviews[0].reviewer_short == ALICE[:20] + "..."
    assert page.eligibility.can_submit is True
    assert [c.label for c in page.eligibility.candidates] == ["Guitar ↔ Coding"]
    assert page.anomalies == []


@pytest.mark.asyncio
async def test_reviews_page_returns_and_logs_anomalies(service, alice_session, swaps, anomaly_logs):
    swaps.add_request(BOB, ALICE, status="cancelled")

    page = await service.reviews_page(alice_session)

    assert [c.id for c in page.eligibility.candidates] == [1]
    assert [(a.id, a.raw_status) for a in page.anomalies] == [(3, "cancelled")]
    assert [(e["event"], e["view"], e["request_id"]) for e in anomaly_logs.entries] == [
        ("swap_request_anomaly", "reviews", 3),
    ]


@pytest.mark.asyncio
async def test_reviews_page_without_completed_swaps(service, alice_session, marketplace):
    page = await service.reviews_page(alice_session)

    assert page.reviews == []
    assert page.eligibility.can_submit is False
    assert page.eligibility.empty_message == "No completed swaps"


@pytest.mark.asyncio
async def test_submit_review_invalidates_reviews(service, alice_session, bob_session, swaps):
    before = await service.reviews_page(bob_session)

    result = await service.submit_review(
        alice_session,
        ReviewForm(swap_request_id=1, rating=5, comment="Great session"),
    )
    after = await service.reviews_page(bob_session)

    assert result.message == "Review submitted successfully!"
    assert before.reviews == []
    assert [r.comment for r in after.reviews] == ["Great session"]


@pytest.mark.asyncio
async def test_submit_review_without_completed_swaps(service, alice_session, marketplace):
    with pytest.raises(NoCompletedSwapsException):
        await service.submit_review(alice_session, ReviewForm(swap_request_id=1))

    assert "submitReview" not in marketplace.methods_called()


@pytest.mark.asyncio
async def test_submit_review_for_unfinished_swap(service, alice_session, swaps):
    with pytest.raises(SwapNotReviewableException) as exc_info:
        await service.submit_review(alice_session, ReviewForm(swap_request_id=2))

    assert exc_info.value.details == {"swap_request_id": 2}
