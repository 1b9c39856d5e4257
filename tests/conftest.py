import json
from typing import Any, Dict, List, Optional

import httpx
import pytest
import structlog

from skillswap.core.actor import ActorClient, ActorSession
from skillswap.core.cache import QueryCache
from skillswap.services import swap_anomalies

ALICE = "alice-7xq2k-4bqcy-principal"
BOB = "bob-3mf9d-2rtlw-principal"
CAROL = "carol-9pz1e-8ksmv-principal"


class FakeActorGateway:
    """
    In-memory stand-in for the actor gateway, served through httpx.MockTransport.

    Keeps just enough state to answer every method the app calls, and records
    each call as (method, principal, args).
    """

    def __init__(self):
        self.profiles: Dict[str, Dict[str, Any]] = {}
        self.requests: List[Dict[str, Any]] = []
        self.reviews: List[Dict[str, Any]] = []
        self.calls: List[tuple] = []
        self.failing: set = set()
        self._next_id = 1

    # ── setup helpers ──

    def add_profile(
        self,
        principal: str,
        name: str,
        *,
        location: str = "Mumbai",
        offered: Optional[List[str]] = None,
        wanted: Optional[List[str]] = None,
        rating: float = 0.0,
    ) -> Dict[str, Any]:
        profile = {
            "principal": principal,
            "name": name,
            "email": f"{name.split()[0].lower()}@example.com",
            "location": location,
            "averageRating": rating,
            "skillsOffered": [{"name": s} for s in offered or []],
            "skillsWanted": [{"name": s} for s in wanted or []],
        }
        self.profiles[principal] = profile
        return profile

    def add_request(self, sender: str, recipient: str, status: str = "pending", **extra) -> Dict[str, Any]:
        record = {
            "id": self._next_id,
            "from": sender,
            "to": recipient,
            "skillOffered": extra.pop("skill_offered", "Guitar"),
            "skillWanted": extra.pop("skill_wanted", "Coding"),
            "status": status,
        }
        record.update(extra)
        self._next_id += 1
        self.requests.append(record)
        return record

    def methods_called(self) -> List[str]:
        return [method for method, _, _ in self.calls]

    # ── transport ──

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handle)

    def handle(self, request: httpx.Request) -> httpx.Response:
        if request.method == "GET":
            return httpx.Response(200, json={"status": "ok"})

        method = request.url.path.rsplit("/", 1)[-1]
        principal = request.headers.get("X-Principal")
        args = json.loads(request.content or b"{}")
        self.calls.append((method, principal, args))

        if method in self.failing:
            return httpx.Response(503, json={"error": "unavailable"})

        handler = getattr(self, f"_{method}", None)
        if handler is None:
            return httpx.Response(404, json={"error": f"unknown method {method}"})
        return httpx.Response(200, json=handler(principal, **args))

    # ── actor methods ──

    def _getCallerUserProfile(self, principal):
        return self.profiles.get(principal)

    def _getUserProfile(self, principal, userId):
        return self.profiles.get(userId)

    def _listUsers(self, principal, offset, limit):
        return list(self.profiles.values())[offset:offset + limit]

    def _findMatches(self, principal):
        me = self.profiles.get(principal)
        if me is None:
            return []
        wanted = {s["name"] for s in me["skillsWanted"]}
        return [
            p for key, p in self.profiles.items()
            if key != principal and wanted & {s["name"] for s in p["skillsOffered"]}
        ]

    def _searchUsersBySkill(self, principal, skillName):
        return [
            p for p in self.profiles.values()
            if any(s["name"].lower() == skillName.lower() for s in p["skillsOffered"])
        ]

    def _saveCallerUserProfile(self, principal, profile):
        self.profiles[principal] = {**profile, "principal": principal}

    def _updateProfile(self, principal, name, email, location, skillsOffered, skillsWanted):
        current = self.profiles.get(principal, {"averageRating": 0.0})
        self.profiles[principal] = {
            **current,
            "principal": principal,
            "name": name,
            "email": email,
            "location": location,
            "skillsOffered": skillsOffered,
            "skillsWanted": skillsWanted,
        }

    def _getMySwapRequests(self, principal):
        return [r for r in self.requests if principal in (r["from"], r["to"])]

    def _sendSwapRequest(self, principal, to, skillOffered, skillWanted):
        record = self.add_request(principal, to, skill_offered=skillOffered, skill_wanted=skillWanted)
        return record["id"]

    def _find(self, request_id):
        return next(r for r in self.requests if r["id"] == request_id)

    def _acceptSwapRequest(self, principal, requestId, sessionTime):
        record = self._find(requestId)
        record["status"] = "accepted"
        record["sessionTime"] = sessionTime

    def _rejectSwapRequest(self, principal, requestId):
        self._find(requestId)["status"] = "rejected"

    def _markSwapComplete(self, principal, requestId):
        self._find(requestId)["status"] = "completed"

    def _getReviewsForUser(self, principal, userId):
        return [r for r in self.reviews if r["reviewee"] == userId]

    def _submitReview(self, principal, swapRequestId, rating, comment):
        record = self._find(swapRequestId)
        reviewee = record["to"] if record["from"] == principal else record["from"]
        self.reviews.append({
            "swapRequestId": swapRequestId,
            "rating": rating,
            "comment": comment,
            "reviewer": principal,
            "reviewee": reviewee,
        })


@pytest.fixture()
def fake_actor() -> FakeActorGateway:
    return FakeActorGateway()


@pytest.fixture()
def actor_client(fake_actor) -> ActorClient:
    return ActorClient("http://actor.test", transport=fake_actor.transport())


@pytest.fixture()
def query_cache() -> QueryCache:
    return QueryCache(stale_seconds=300)


@pytest.fixture()
def alice_session(actor_client, query_cache) -> ActorSession:
    return ActorSession(client=actor_client, cache=query_cache, principal=ALICE)


@pytest.fixture()
def bob_session(actor_client, query_cache) -> ActorSession:
    return ActorSession(client=actor_client, cache=query_cache, principal=BOB)


@pytest.fixture()
def anonymous_session(actor_client, query_cache) -> ActorSession:
    return ActorSession(client=actor_client, cache=query_cache, principal=None)


@pytest.fixture()
def marketplace(fake_actor) -> FakeActorGateway:
    """Three users; Alice and Bob want what the other offers."""
    fake_actor.add_profile(ALICE, "Alice Fernandes", offered=["Guitar", "Piano"], wanted=["Coding"], rating=4.5)
    fake_actor.add_profile(BOB, "Bob Mehta", location="Pune", offered=["Coding"], wanted=["Guitar"], rating=4.8)
    fake_actor.add_profile(CAROL, "Carol Dsouza", location="Navi Mumbai", offered=["Yoga"], wanted=["Piano"])
    return fake_actor


@pytest.fixture()
def anomaly_logs(monkeypatch) -> structlog.testing.LogCapture:
    """Events logged by the swap anomaly reporter."""
    capture = structlog.testing.LogCapture()
    logger = structlog.wrap_logger(
        structlog.testing.CapturingLogger(),
        processors=[capture],
        wrapper_class=structlog.BoundLogger,
    )
    monkeypatch.setattr(swap_anomalies, "logger", logger)
    return capture
