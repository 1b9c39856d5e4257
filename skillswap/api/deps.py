"""
API dependencies for dependency injection.
"""
from typing import Optional

from fastapi import Depends, Request

from skillswap.core.actor import ActorSession
from skillswap.core.config import settings
from skillswap.core.exceptions import UnauthorizedException


async def get_caller_principal(request: Request) -> Optional[str]:
    """
    Caller identity as resolved by the identity provider, or None.

    The provider sits in front of this service and puts the principal's text
    form in the configured header; an absent or blank header means the caller
    is not (yet) identified.
    """
    value = request.headers.get(settings.principal_header, "").strip()
    return value or None


async def get_actor_session(
    request: Request,
    principal: Optional[str] = Depends(get_caller_principal),
) -> ActorSession:
    """
    Session for read endpoints.

    Works with or without a principal; views fall back to empty results.
    """
    return ActorSession(
        client=request.app.state.actor,
        cache=request.app.state.query_cache,
        principal=principal,
    )


async def get_authenticated_session(
    session: ActorSession = Depends(get_actor_session),
) -> ActorSession:
    """
    Session for endpoints that change actor state.

    Raises:
        UnauthorizedException: If the caller has no principal.
    """
    if not session.principal:
        raise UnauthorizedException("Authentication required")
    return session
