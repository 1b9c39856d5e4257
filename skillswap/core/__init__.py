"""Core module exports."""
from skillswap.core.config import settings, get_settings
from skillswap.core.cache import QueryCache, CacheEntry
from skillswap.core.actor import ActorClient, ActorSession
from skillswap.core.exceptions import (
    APIException,
    BadRequestException,
    UnauthorizedException,
    ForbiddenException,
    NotFoundException,
    ConflictException,
    ValidationException,
    ActorUnavailableException,
    InvalidTransitionException,
    SwapRequestNotFoundException,
    MissingPrincipalException,
    ProfileNotFoundException,
    NoCompletedSwapsException,
    SwapNotReviewableException,
)

__all__ = [
    # Config
    "settings",
    "get_settings",
    # Cache
    "QueryCache",
    "CacheEntry",
    # Actor
    "ActorClient",
    "ActorSession",
    # Exceptions
    "APIException",
    "BadRequestException",
    "UnauthorizedException",
    "ForbiddenException",
    "NotFoundException",
    "ConflictException",
    "ValidationException",
    "ActorUnavailableException",
    "InvalidTransitionException",
    "SwapRequestNotFoundException",
    "MissingPrincipalException",
    "ProfileNotFoundException",
    "NoCompletedSwapsException",
    "SwapNotReviewableException",
]
