from skillswap.services.review_eligibility import (
    NO_COMPLETED_SWAPS,
    build_eligibility,
    select_reviewable_swaps,
)


def _record(id, status, offered="Guitar", wanted="Coding"):
    return {
        "id": id,
        "from": "principal-a",
        "to": "principal-b",
        "skillOffered": offered,
        "skillWanted": wanted,
        "status": status,
    }


def test_only_completed_swaps_in_original_order():
    records = [
        _record(5, "completed"),
        _record(1, "pending"),
        _record(3, "completed"),
        _record(2, "accepted"),
        _record(4, "rejected"),
    ]

    assert [r.id for r in select_reviewable_swaps(records)] == [5, 3]


def test_selection_is_idempotent():
    records = [_record(1, "completed"), _record(2, "pending"), _record(3, "completed")]

    first = select_reviewable_swaps(records)
    second = select_reviewable_swaps(records)

    assert first == second


def test_malformed_records_are_never_reviewable():
    records = [_record(1, "completed"), _record(2, "done")]

    assert [r.id for r in select_reviewable_swaps(records)] == [1]


def test_empty_set_disables_submission_with_message():
    eligibility = build_eligibility([_record(1, "pending")])

    assert eligibility.candidates == []
    assert eligibility.can_submit is False
    assert eligibility.empty_message == NO_COMPLETED_SWAPS == "No completed swaps"


def test_candidates_are_labelled_by_skill_pair():
    eligibility = build_eligibility([_record(9, "completed", offered="Tabla", wanted="Spanish")])

    assert eligibility.can_submit is True
    assert eligibility.empty_message is None
    assert eligibility.candidates[0].id == 9
    assert eligibility.candidates[0].label == "Tabla ↔ Spanish"


def test_no_requests_at_all():
    assert build_eligibility(None).can_submit is False
