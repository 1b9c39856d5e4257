"""
Directory (search page) schemas.
"""
from enum import Enum
from typing import List

from skillswap.schemas.base import BaseSchema
from skillswap.schemas.profile import UserCard


class SortKey(str, Enum):
    """Directory ordering."""

    RATING = "rating"  # highest rated first, stable on ties
    NAME = "name"  # locale-aware ascending


class DirectoryQuery(BaseSchema):
    """Search bar state."""

    q: str = ""
    location: str = ""
    sort: SortKey = SortKey.RATING


class DirectoryPage(BaseSchema):
    """Search results."""

    query: DirectoryQuery
    count: int
    summary: str  # "1 user found" / "3 users found"
    users: List[UserCard] = []
