"""
Directory filter/sort pipeline for the search page.

    1. free-text query   name, offered skill or wanted skill contains it
    2. location          location contains it
    3. sort              rating (desc, stable) or name (locale-aware asc)

Matching is case-insensitive substring matching. Blank filters skip their
stage entirely. Every stage returns a new list; the input is never mutated.
"""
import unicodedata
from typing import List, Sequence, Tuple

from skillswap.schemas.directory import SortKey
from skillswap.schemas.profile import UserProfile


def _fold(text: str) -> str:
    return text.casefold()


def _matches_query(profile: UserProfile, needle: str) -> bool:
    if needle in _fold(profile.name):
        return True
    if any(needle in _fold(skill.name) for skill in profile.skills_offered):
        return True
    return any(needle in _fold(skill.name) for skill in profile.skills_wanted)


def filter_by_query(profiles: Sequence[UserProfile], query: str) -> List[UserProfile]:
    """Keep profiles whose name or any skill contains query."""
    if not query.strip():
        return list(profiles)
    # Blankness is judged on the trimmed text; matching uses the query as typed
    needle = _fold(query)
    return [p for p in profiles if _matches_query(p, needle)]


def filter_by_location(profiles: Sequence[UserProfile], location: str) -> List[UserProfile]:
    """Keep profiles whose location contains the filter."""
    if not location.strip():
        return list(profiles)
    needle = _fold(location)
    return [p for p in profiles if needle in _fold(p.location)]


def locale_sort_key(name: str) -> Tuple[str, str, str]:
    """
    Collation key approximating a locale compare.

    Primary: accents stripped and case folded ("émile" sorts with "emile").
    Secondary: accents kept, case folded. Tertiary: case, lowercase first
    ("emma" before "Emma").
    """
    decomposed = unicodedata.normalize("NFKD", name)
    base = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return base.casefold(), decomposed.casefold(), name.swapcase()


def sort_profiles(profiles: Sequence[UserProfile], sort: SortKey) -> List[UserProfile]:
    """Order profiles by rating (highest first) or name. sorted() is stable."""
    if sort is SortKey.RATING:
        return sorted(profiles, key=lambda p: -p.average_rating)
    if sort is SortKey.NAME:
        return sorted(profiles, key=lambda p: locale_sort_key(p.name))
    raise ValueError(f"Unknown sort key: {sort!r}")


def apply_directory_pipeline(
    profiles: Sequence[UserProfile],
    query: str = "",
    location: str = "",
    sort: SortKey = SortKey.RATING,
) -> List[UserProfile]:
    """Run query filter, location filter and sort, in that order."""
    filtered = filter_by_query(profiles, query)
    filtered = filter_by_location(filtered, location)
    return sort_profiles(filtered, SortKey(sort))
