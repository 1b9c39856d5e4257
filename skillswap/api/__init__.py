"""
API package.
"""
from skillswap.api.routes import api_router
from skillswap.api.deps import (
    get_caller_principal,
    get_actor_session,
    get_authenticated_session,
)

__all__ = [
    "api_router",
    "get_caller_principal",
    "get_actor_session",
    "get_authenticated_session",
]
