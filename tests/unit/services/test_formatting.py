from skillswap.schemas.profile import Skill, UserProfile
from skillswap.services.formatting import (
    format_session_time,
    initials,
    rating_label,
    results_summary,
    shorten,
    to_user_card,
)


def test_initials():
    assert initials("Priya Sharma") == "PS"
    assert initials("asha") == "A"
    assert initials("Ravi  Kumar Rao") == "RKR"


def test_rating_label():
    assert rating_label(0) == "New"
    assert rating_label(4.26) == "4.3"
    assert rating_label(5) == "5.0"


def test_shorten():
    assert shorten("abcdefghijklmnop", 10) == "abcdefghij..."


def test_session_time_formatting():
    # 2026-10-18T09:00:00Z is 14:30 in Asia/Kolkata
    assert format_session_time(1792314000000, "Asia/Kolkata") == "18 Oct 2026, 02:30 pm"
    assert format_session_time(None) == "Not scheduled"
    assert format_session_time(0) == "Not scheduled"


def test_results_summary():
    assert results_summary(1) == "1 user found"
    assert results_summary(0) == "0 users found"
    assert results_summary(12) == "12 users found"


def test_user_card_previews_skills():
    profile = UserProfile(
        principal="principal-x",
        name="Neha Joshi",
        email="neha@example.com",
        location="Delhi",
        average_rating=0,
        skills_offered=[Skill(name=s) for s in ["A", "B", "C", "D", "E"]],
        skills_wanted=[Skill(name="F")],
    )

    card = to_user_card(profile, preview=3)

    assert card.initials == "NJ"
    assert card.rating_label == "New"
    assert card.skills_offered == ["A", "B", "C"]
    assert card.more_offered == 2
    assert card.skills_wanted == ["F"]
    assert card.more_wanted == 0
    assert card.can_request is True


def test_user_card_without_principal_cannot_request():
    profile = UserProfile(name="Anon", email="a@example.com", location="Goa")

    assert to_user_card(profile).can_request is False
