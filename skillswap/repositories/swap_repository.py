"""
Swap request repository.

Reads return the actor's records undecoded: the request classifier owns
the decision of what a malformed record means.
"""
from typing import Any, Dict, List

from skillswap.core.actor import ActorSession
from skillswap.repositories.base import BaseRepository
from skillswap.repositories.profile_repository import CALLER_PROFILE
from skillswap.schemas.swap import SwapRequest

MY_SWAP_REQUESTS = "mySwapRequests"


class SwapRepository(BaseRepository[SwapRequest]):
    """Swap request reads and lifecycle mutations."""

    def __init__(self):
        super().__init__(SwapRequest)

    async def list_mine(self, session: ActorSession) -> List[Dict[str, Any]]:
        """Every request the caller sent or received, as raw actor records."""
        if not session.principal:
            return []

        async def fetch():
            return list(await session.client.get_my_swap_requests(session.principal))

        return await self._read(session, (MY_SWAP_REQUESTS, session.principal), fetch)

    async def send(self, session: ActorSession, *, to: str, skill_offered: str, skill_wanted: str) -> int:
        request_id = await session.client.send_swap_request(
            session.principal,
            to=to,
            skill_offered=skill_offered,
            skill_wanted=skill_wanted,
        )
        self._invalidate(session, MY_SWAP_REQUESTS)
        return request_id

    async def accept(self, session: ActorSession, request_id: int, session_time: int) -> None:
        await session.client.accept_swap_request(session.principal, request_id, session_time)
        self._invalidate(session, MY_SWAP_REQUESTS)

    async def reject(self, session: ActorSession, request_id: int) -> None:
        await session.client.reject_swap_request(session.principal, request_id)
        self._invalidate(session, MY_SWAP_REQUESTS)

    async def complete(self, session: ActorSession, request_id: int) -> None:
        await session.client.mark_swap_complete(session.principal, request_id)
        # Completion can move the caller's rating
        self._invalidate(session, MY_SWAP_REQUESTS, CALLER_PROFILE)
