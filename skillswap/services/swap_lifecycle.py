"""
Swap request state machine.

    pending  --accept (recipient, session time)--> accepted
    pending  --reject (recipient)---------------> rejected   [terminal]
    accepted --complete (either party)-----------> completed  [terminal]

The actor is the source of truth for transitions; this module lets the
service refuse an impossible action before spending a round trip on it,
and tells the requests page which buttons to show.
"""
from typing import Dict, List, Optional, Tuple

from skillswap.core.exceptions import ForbiddenException, InvalidTransitionException, ValidationException
from skillswap.schemas.swap import SwapAction, SwapRequest, SwapStatus

TRANSITIONS: Dict[Tuple[SwapStatus, SwapAction], SwapStatus] = {
    (SwapStatus.PENDING, SwapAction.ACCEPT): SwapStatus.ACCEPTED,
    (SwapStatus.PENDING, SwapAction.REJECT): SwapStatus.REJECTED,
    (SwapStatus.ACCEPTED, SwapAction.COMPLETE): SwapStatus.COMPLETED,
}

# Actions only the recipient of the request may take
RECIPIENT_ONLY = frozenset({SwapAction.ACCEPT, SwapAction.REJECT})


def next_status(status: SwapStatus, action: SwapAction) -> SwapStatus:
    """
    Return the status reached by applying action to status.

    Raises:
        InvalidTransitionException: If the transition is not in the table.
    """
    try:
        return TRANSITIONS[(status, action)]
    except KeyError:
        raise InvalidTransitionException(
            f"Cannot {action.value} a swap request that is {status.value}"
        )


def can_act(request: SwapRequest, action: SwapAction, caller: Optional[str]) -> bool:
    """True if caller may apply action to request right now."""
    if not caller or not request.involves(caller):
        return False
    if action in RECIPIENT_ONLY and request.to != caller:
        return False
    return (request.status, action) in TRANSITIONS


def allowed_actions(request: SwapRequest, caller: Optional[str]) -> List[SwapAction]:
    """Actions the caller may take on request, in display order."""
    return [action for action in SwapAction if can_act(request, action, caller)]


def apply_transition(
    request: SwapRequest,
    action: SwapAction,
    caller: str,
    *,
    session_time: Optional[int] = None,
) -> SwapRequest:
    """
    Validate action against the state machine and the caller's role.

    Returns a copy of request in its new status; the input is untouched.

    Raises:
        ForbiddenException: Caller is not a party, or not the recipient for accept/reject.
        ValidationException: Accept without a session time.
        InvalidTransitionException: Status does not allow the action.
    """
    if not request.involves(caller):
        raise ForbiddenException("Not a party to this swap request")
    if action in RECIPIENT_ONLY and request.to != caller:
        raise ForbiddenException(f"Only the recipient can {action.value} a swap request")

    status = next_status(request.status, action)

    updates = {"status": status}
    if action is SwapAction.ACCEPT:
        if not session_time:
            raise ValidationException("Please select a session date", code="SESSION_TIME_REQUIRED")
        updates["session_time"] = session_time

    return request.model_copy(update=updates)
