"""
Swap request schemas.
"""
from enum import Enum
from typing import List, Optional

from pydantic import ConfigDict, Field

from skillswap.schemas.base import BaseSchema, RequiredText


class SwapStatus(str, Enum):
    """Lifecycle status of a swap request."""

    PENDING = "pending"
    ACCEPTED = "accepted"
    REJECTED = "rejected"
    COMPLETED = "completed"


class SwapAction(str, Enum):
    """Things a participant can do to a swap request."""

    ACCEPT = "accept"
    REJECT = "reject"
    COMPLETE = "complete"


class SwapRequest(BaseSchema):
    """A swap request as stored by the actor. Immutable snapshot."""

    model_config = ConfigDict(frozen=True)

    id: int
    from_: str = Field(..., alias="from")
    to: str
    skill_offered: str
    skill_wanted: str
    status: SwapStatus
    session_time: Optional[int] = None  # epoch millis, set once accepted

    def involves(self, principal: str) -> bool:
        return principal in (self.from_, self.to)


class MalformedSwapRequest(BaseSchema):
    """Anomaly marker for an actor record that could not be read as a SwapRequest."""

    id: Optional[int] = None
    raw_status: Optional[str] = None
    reason: str


class RequestBuckets(BaseSchema):
    """Caller's swap requests split into the four disjoint inbox views."""

    incoming: List[SwapRequest] = []
    outgoing: List[SwapRequest] = []
    accepted: List[SwapRequest] = []
    completed: List[SwapRequest] = []
    anomalies: List[MalformedSwapRequest] = []


class RequestCard(BaseSchema):
    """One swap request rendered for a tab of the requests page."""

    id: int
    status: SwapStatus
    counterpart_label: str  # "From" / "To"
    counterpart: str
    counterpart_short: str
    they_offer: str
    you_offer: str
    session_time: Optional[int] = None
    session_label: str  # "Not scheduled" until a time is set
    actions: List[SwapAction] = []


class RequestTab(BaseSchema):
    """A tab of the requests page."""

    count: int
    items: List[RequestCard] = []
    empty_title: Optional[str] = None
    empty_hint: Optional[str] = None


class RequestsPage(BaseSchema):
    """Requests page: one tab per bucket plus any anomalies found."""

    incoming: RequestTab
    outgoing: RequestTab
    accepted: RequestTab
    completed: RequestTab
    anomalies: List[MalformedSwapRequest] = []


class SendSwapRequestForm(BaseSchema):
    """Send-request dialog."""

    to: Optional[str] = None
    skill_offered: RequiredText
    skill_wanted: RequiredText


class AcceptSwapRequestForm(BaseSchema):
    """Schedule dialog shown when accepting a request."""

    session_time: int = Field(..., gt=0)  # epoch millis


class SwapRequestCreated(BaseSchema):
    """Response to a sent swap request."""

    id: int
    message: str = "Swap request sent!"
