"""
Swap request routes.
"""
from fastapi import APIRouter, Depends, status

from skillswap.api.deps import get_actor_session, get_authenticated_session
from skillswap.core.actor import ActorSession
from skillswap.schemas.swap import (
    AcceptSwapRequestForm,
    RequestsPage,
    SendSwapRequestForm,
    SwapRequest,
    SwapRequestCreated,
)
from skillswap.services.swap_service import SwapService

router = APIRouter(prefix="/requests", tags=["requests"])

swap_service = SwapService()


@router.get("", response_model=RequestsPage)
async def list_requests(session: ActorSession = Depends(get_actor_session)):
    """Incoming, outgoing, accepted and completed tabs."""
    return await swap_service.requests_page(session)


@router.post("", response_model=SwapRequestCreated, status_code=status.HTTP_201_CREATED)
async def send_request(
    form: SendSwapRequestForm,
    session: ActorSession = Depends(get_authenticated_session),
):
    """Send a swap request to another user."""
    return await swap_service.send_request(session, form)


@router.post("/{request_id}/accept", response_model=SwapRequest)
async def accept_request(
    request_id: int,
    form: AcceptSwapRequestForm,
    session: ActorSession = Depends(get_authenticated_session),
):
    """Accept an incoming request and schedule the session."""
    return await swap_service.accept(session, request_id, form.session_time)


@router.post("/{request_id}/reject", response_model=SwapRequest)
async def reject_request(
    request_id: int,
    session: ActorSession = Depends(get_authenticated_session),
):
    """Reject an incoming request."""
    return await swap_service.reject(session, request_id)


@router.post("/{request_id}/complete", response_model=SwapRequest)
async def complete_request(
    request_id: int,
    session: ActorSession = Depends(get_authenticated_session),
):
    """Mark an accepted swap as completed."""
    return await swap_service.complete(session, request_id)
