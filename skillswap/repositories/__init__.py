"""
Repository layer - cached access to the remote actor.
"""
from skillswap.repositories.base import BaseRepository
from skillswap.repositories.profile_repository import ProfileRepository
from skillswap.repositories.swap_repository import SwapRepository
from skillswap.repositories.review_repository import ReviewRepository

__all__ = [
    "BaseRepository",
    "ProfileRepository",
    "SwapRepository",
    "ReviewRepository",
]
