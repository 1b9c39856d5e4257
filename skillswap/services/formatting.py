"""
Display helpers shared by the page services.
"""
from datetime import datetime
from typing import Optional
from zoneinfo import ZoneInfo

from skillswap.core.config import settings
from skillswap.schemas.profile import ProfileView, UserCard, UserProfile

NOT_SCHEDULED = "Not scheduled"


def initials(name: str) -> str:
    """First letter of every word, upper-cased: "Priya Sharma" -> "PS"."""
    return "".join(part[0] for part in name.split(" ") if part).upper()


def rating_label(average_rating: float) -> str:
    """One decimal place, or "New" for unrated users."""
    return f"{average_rating:.1f}" if average_rating > 0 else "New"


def shorten(principal: str, keep: int) -> str:
    """Principal prefix followed by an ellipsis."""
    return principal[:keep] + "..."


def format_session_time(session_time: Optional[int], tz: Optional[str] = None) -> str:
    """
    Render an epoch-millisecond session time, e.g. "18 Oct 2026, 02:30 pm".

    Missing or zero times read "Not scheduled".
    """
    if not session_time:
        return NOT_SCHEDULED
    moment = datetime.fromtimestamp(session_time / 1000, tz=ZoneInfo(tz or settings.display_timezone))
    return f"{moment.day} {moment:%b %Y, %I:%M} {moment:%p}".replace("AM", "am").replace("PM", "pm")


def results_summary(count: int) -> str:
    return f"{count} {'user' if count == 1 else 'users'} found"


def to_user_card(profile: UserProfile, preview: Optional[int] = None) -> UserCard:
    """Card view of a profile, showing the first few skills of each list."""
    keep = settings.card_skill_preview if preview is None else preview
    offered = [skill.name for skill in profile.skills_offered]
    wanted = [skill.name for skill in profile.skills_wanted]

    return UserCard(
        principal=profile.principal,
        name=profile.name,
        initials=initials(profile.name),
        location=profile.location,
        average_rating=profile.average_rating,
        rating_label=rating_label(profile.average_rating),
        skills_offered=offered[:keep],
        skills_wanted=wanted[:keep],
        more_offered=max(len(offered) - keep, 0),
        more_wanted=max(len(wanted) - keep, 0),
        can_request=bool(profile.principal),
    )


def to_profile_view(profile: UserProfile) -> ProfileView:
    return ProfileView(
        profile=profile,
        initials=initials(profile.name),
        rating_label=rating_label(profile.average_rating),
    )
