"""
Swap service - requests page and the swap request lifecycle.

Mutations are checked against the state machine with the cached copy of
the request before the actor is called; the actor still has the final say.
"""
from typing import List, Optional

from skillswap.core.actor import ActorSession
from skillswap.core.exceptions import (
    BadRequestException,
    MissingPrincipalException,
    ProfileNotFoundException,
    SwapRequestNotFoundException,
    UnauthorizedException,
    ValidationException,
)
from skillswap.core.logging import get_logger
from skillswap.repositories.profile_repository import ProfileRepository
from skillswap.repositories.swap_repository import SwapRepository
from skillswap.schemas.swap import (
    RequestCard,
    RequestsPage,
    RequestTab,
    SendSwapRequestForm,
    SwapAction,
    SwapRequest,
    SwapRequestCreated,
)
from skillswap.services.formatting import format_session_time, shorten
from skillswap.services.request_classifier import classify_requests
from skillswap.services.swap_anomalies import read_swap_requests, report_anomalies
from skillswap.services.swap_lifecycle import allowed_actions, apply_transition

logger = get_logger(__name__)

# (title, hint) shown when a tab has nothing in it
EMPTY_TABS = {
    "incoming": ("No incoming requests", "Check back later for new swap requests"),
    "outgoing": ("No outgoing requests", "Send a swap request to start learning!"),
    "accepted": ("No accepted requests", "Accept incoming requests to start swapping"),
    "completed": ("No completed swaps yet", "Complete your first skill exchange!"),
}


class SwapService:
    """Handles the requests inbox and swap request transitions."""

    def __init__(self):
        self.swap_repo = SwapRepository()
        self.profile_repo = ProfileRepository()

    async def requests_page(self, session: ActorSession) -> RequestsPage:
        """Caller's requests split into incoming/outgoing/accepted/completed tabs."""
        records = await self.swap_repo.list_mine(session)
        buckets = classify_requests(records, session.principal)
        report_anomalies(buckets.anomalies, "requests")

        return RequestsPage(
            incoming=self._tab("incoming", buckets.incoming, session.principal),
            outgoing=self._tab("outgoing", buckets.outgoing, session.principal),
            accepted=self._tab("accepted", buckets.accepted, session.principal),
            completed=self._tab("completed", buckets.completed, session.principal),
            anomalies=buckets.anomalies,
        )

    async def send_request(self, session: ActorSession, form: SendSwapRequestForm) -> SwapRequestCreated:
        """
        Propose swapping one of the caller's skills for one of the recipient's.

        Raises:
            MissingPrincipalException: The recipient has no identity to address.
            ProfileNotFoundException: Caller or recipient has no profile.
            ValidationException: A skill is not offered by the side that should offer it.
        """
        caller = self._require_caller(session)
        if not form.to:
            raise MissingPrincipalException()
        if form.to == caller:
            raise BadRequestException("Cannot send a swap request to yourself", code="SELF_REQUEST")

        me = await self.profile_repo.get_caller_profile(session)
        them = await self.profile_repo.get_user_profile(session, form.to)
        if me is None or them is None:
            raise ProfileNotFoundException()

        if form.skill_offered not in {s.name for s in me.skills_offered}:
            raise ValidationException(
                f"You do not offer '{form.skill_offered}'",
                code="SKILL_NOT_OFFERED",
            )
        if form.skill_wanted not in {s.name for s in them.skills_offered}:
            raise ValidationException(
                f"{them.name} does not offer '{form.skill_wanted}'",
                code="SKILL_NOT_OFFERED",
            )

        request_id = await self.swap_repo.send(
            session,
            to=form.to,
            skill_offered=form.skill_offered,
            skill_wanted=form.skill_wanted,
        )
        logger.info("swap_request_sent", request_id=request_id, to=form.to)
        return SwapRequestCreated(id=request_id)

    async def accept(self, session: ActorSession, request_id: int, session_time: int) -> SwapRequest:
        """Accept an incoming request and schedule the session."""
        request = await self._get_request(session, request_id)
        updated = apply_transition(request, SwapAction.ACCEPT, session.principal, session_time=session_time)
        await self.swap_repo.accept(session, request_id, session_time)
        logger.info("swap_request_accepted", request_id=request_id, session_time=session_time)
        return updated

    async def reject(self, session: ActorSession, request_id: int) -> SwapRequest:
        request = await self._get_request(session, request_id)
        updated = apply_transition(request, SwapAction.REJECT, session.principal)
        await self.swap_repo.reject(session, request_id)
        logger.info("swap_request_rejected", request_id=request_id)
        return updated

    async def complete(self, session: ActorSession, request_id: int) -> SwapRequest:
        request = await self._get_request(session, request_id)
        updated = apply_transition(request, SwapAction.COMPLETE, session.principal)
        await self.swap_repo.complete(session, request_id)
        logger.info("swap_request_completed", request_id=request_id)
        return updated

    def _require_caller(self, session: ActorSession) -> str:
        if not session.principal:
            raise UnauthorizedException("Authentication required")
        return session.principal

    async def _get_request(self, session: ActorSession, request_id: int) -> SwapRequest:
        """
        Find one of the caller's requests by id.

        Only the caller's own requests are visible, so a foreign id reads as
        not found rather than forbidden.
        """
        self._require_caller(session)
        records = await self.swap_repo.list_mine(session)
        requests, _ = read_swap_requests(records, "requests")

        for request in requests:
            if request.id == request_id:
                return request
        raise SwapRequestNotFoundException()

    def _tab(self, name: str, requests: List[SwapRequest], caller: Optional[str]) -> RequestTab:
        items = [self._to_card(request, caller) for request in requests]
        if items:
            return RequestTab(count=len(items), items=items)
        title, hint = EMPTY_TABS[name]
        return RequestTab(count=0, items=[], empty_title=title, empty_hint=hint)

    def _to_card(self, request: SwapRequest, caller: Optional[str]) -> RequestCard:
        """Card for one request, worded from the caller's side."""
        received = request.to == caller
        counterpart = request.from_ if received else request.to

        return RequestCard(
            id=request.id,
            status=request.status,
            counterpart_label="From" if received else "To",
            counterpart=counterpart,
            counterpart_short=shorten(counterpart, 10),
            they_offer=request.skill_offered if received else request.skill_wanted,
            you_offer=request.skill_wanted if received else request.skill_offered,
            session_time=request.session_time,
            session_label=format_session_time(request.session_time),
            actions=allowed_actions(request, caller),
        )
