"""
Transport for the remote actor gateway.

The marketplace's durable state and business rules live behind an actor
interface; the gateway exposes each actor method as

    POST {actor_url}/{method}   body: JSON object of named arguments
                                response: JSON-encoded return value

The caller principal travels in the configured principal header so the actor
sees the same identity the browser authenticated as. Big integers (request
ids, timestamps) are plain JSON numbers, principals are their text form and
optional returns are JSON null.
"""
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

import httpx

from skillswap.core.cache import QueryCache
from skillswap.core.config import settings
from skillswap.core.exceptions import ActorUnavailableException
from skillswap.core.logging import get_logger

logger = get_logger(__name__)


class ActorClient:
    """
    Thin async client over the actor gateway.

    Every method returns the decoded JSON exactly as the actor produced it;
    validation into schemas happens in the repositories.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        *,
        timeout: Optional[float] = None,
        api_key: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        headers = {"Accept": "application/json"}
        key = api_key if api_key is not None else settings.actor_api_key
        if key:
            headers["Authorization"] = f"Bearer {key}"

        self._client = httpx.AsyncClient(
            base_url=(base_url or settings.actor_url).rstrip("/"),
            timeout=timeout or settings.actor_timeout_seconds,
            headers=headers,
            transport=transport,
        )

    async def __aenter__(self) -> "ActorClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def call(self, method: str, principal: Optional[str] = None, **args: Any) -> Any:
        """
        Invoke an actor method and return its decoded result.

        Raises:
            ActorUnavailableException: On timeout, transport failure or non-2xx reply.
        """
        headers = {settings.principal_header: principal} if principal else {}

        try:
            response = await self._client.post(f"/{method}", json=args, headers=headers)
            response.raise_for_status()
        except httpx.TimeoutException:
            logger.warning("actor_call_failed", method=method, reason="timeout")
            raise ActorUnavailableException(method, "Request timed out")
        except httpx.HTTPStatusError as e:
            logger.warning(
                "actor_call_failed",
                method=method,
                reason="http_status",
                status_code=e.response.status_code,
            )
            raise ActorUnavailableException(method, f"HTTP error: {e.response.status_code}")
        except httpx.HTTPError as e:
            logger.warning("actor_call_failed", method=method, reason=type(e).__name__)
            raise ActorUnavailableException(method, str(e) or type(e).__name__)

        if not response.content:
            return None
        try:
            return response.json()
        except ValueError:
            logger.warning("actor_call_failed", method=method, reason="invalid_json")
            raise ActorUnavailableException(method, "Malformed response")

    async def ping(self) -> bool:
        """Reachability probe used by the health check."""
        try:
            response = await self._client.get("/")
            return response.status_code < 500
        except httpx.HTTPError:
            return False

    # ── Profiles ────────────────────────────────────────────────────────────

    async def get_caller_user_profile(self, principal: str) -> Optional[Dict[str, Any]]:
        return await self.call("getCallerUserProfile", principal)

    async def get_user_profile(self, principal: Optional[str], user_id: str) -> Optional[Dict[str, Any]]:
        return await self.call("getUserProfile", principal, userId=user_id)

    async def list_users(self, principal: Optional[str], offset: int, limit: int) -> List[Dict[str, Any]]:
        return await self.call("listUsers", principal, offset=offset, limit=limit) or []

    async def find_matches(self, principal: str) -> List[Dict[str, Any]]:
        return await self.call("findMatches", principal) or []

    async def search_users_by_skill(self, principal: Optional[str], skill_name: str) -> List[Dict[str, Any]]:
        return await self.call("searchUsersBySkill", principal, skillName=skill_name) or []

    async def save_caller_user_profile(self, principal: str, profile: Dict[str, Any]) -> None:
        await self.call("saveCallerUserProfile", principal, profile=profile)

    async def update_profile(
        self,
        principal: str,
        *,
        name: str,
        email: str,
        location: str,
        skills_offered: List[Dict[str, Any]],
        skills_wanted: List[Dict[str, Any]],
    ) -> None:
        await self.call(
            "updateProfile",
            principal,
            name=name,
            email=email,
            location=location,
            skillsOffered=skills_offered,
            skillsWanted=skills_wanted,
        )

    # ── Swap requests ───────────────────────────────────────────────────────

    async def get_my_swap_requests(self, principal: str) -> List[Dict[str, Any]]:
        return await self.call("getMySwapRequests", principal) or []

    async def send_swap_request(
        self,
        principal: str,
        *,
        to: str,
        skill_offered: str,
        skill_wanted: str,
    ) -> int:
        request_id = await self.call(
            "sendSwapRequest",
            principal,
            to=to,
            skillOffered=skill_offered,
            skillWanted=skill_wanted,
        )
        return int(request_id)

    async def accept_swap_request(self, principal: str, request_id: int, session_time: int) -> None:
        await self.call("acceptSwapRequest", principal, requestId=request_id, sessionTime=session_time)

    async def reject_swap_request(self, principal: str, request_id: int) -> None:
        await self.call("rejectSwapRequest", principal, requestId=request_id)

    async def mark_swap_complete(self, principal: str, request_id: int) -> None:
        await self.call("markSwapComplete", principal, requestId=request_id)

    # ── Reviews ─────────────────────────────────────────────────────────────

    async def get_reviews_for_user(self, principal: Optional[str], user_id: str) -> List[Dict[str, Any]]:
        return await self.call("getReviewsForUser", principal, userId=user_id) or []

    async def submit_review(
        self,
        principal: str,
        *,
        swap_request_id: int,
        rating: int,
        comment: Optional[str],
    ) -> None:
        await self.call(
            "submitReview",
            principal,
            swapRequestId=swap_request_id,
            rating=rating,
            comment=comment,
        )


@dataclass
class ActorSession:
    """
    Per-request handle on the actor: shared client, shared cache, caller identity.

    principal is None until the identity provider has resolved the caller.
    """

    client: ActorClient
    cache: QueryCache
    principal: Optional[str] = None
