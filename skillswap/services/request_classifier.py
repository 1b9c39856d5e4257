"""
Request classifier - splits a caller's swap requests into inbox buckets.

    incoming   to == caller   and pending
    outgoing   from == caller and pending
    accepted   accepted, either direction
    completed  completed, either direction

Rejected requests land in no bucket. Records whose status is not one of the
four known values are reported as anomalies instead of being bucketed.
Pure functions: no I/O, no logging, inputs are never mutated.
"""
from typing import Any, Iterable, List, Mapping, Optional, Tuple

from pydantic import ValidationError

from skillswap.schemas.swap import MalformedSwapRequest, RequestBuckets, SwapRequest, SwapStatus


def _anomaly_from_record(item: Any, reason: str) -> MalformedSwapRequest:
    raw_id = item.get("id") if isinstance(item, Mapping) else getattr(item, "id", None)
    raw_status = item.get("status") if isinstance(item, Mapping) else getattr(item, "status", None)
    try:
        request_id = int(raw_id) if raw_id is not None else None
    except (TypeError, ValueError):
        request_id = None
    return MalformedSwapRequest(
        id=request_id,
        raw_status=None if raw_status is None else str(getattr(raw_status, "value", raw_status)),
        reason=reason,
    )


def coerce_swap_requests(
    items: Optional[Iterable[Any]],
) -> Tuple[List[SwapRequest], List[MalformedSwapRequest]]:
    """
    Read actor records (dicts or SwapRequest objects) into SwapRequest.

    Returns the well-formed requests and the anomalies, both in input order.
    """
    requests: List[SwapRequest] = []
    anomalies: List[MalformedSwapRequest] = []

    for item in items or ():
        if isinstance(item, SwapRequest):
            # model_construct() skips validation, so the enum is not guaranteed
            if isinstance(item.status, SwapStatus):
                requests.append(item)
            else:
                anomalies.append(_anomaly_from_record(item, "Unknown swap request status"))
            continue

        if not isinstance(item, Mapping):
            anomalies.append(_anomaly_from_record(item, "Not a swap request record"))
            continue

        try:
            requests.append(SwapRequest.model_validate(item))
        except ValidationError as e:
            first = e.errors()[0]
            field = ".".join(str(part) for part in first["loc"])
            anomalies.append(_anomaly_from_record(item, f"{field}: {first['msg']}"))

    return requests, anomalies


def classify_requests(items: Optional[Iterable[Any]], caller: Optional[str]) -> RequestBuckets:
    """
    Partition the caller's swap requests into the four inbox buckets.

    Relative order from the input is kept inside every bucket. With no caller
    identity (not resolved yet) every bucket is empty.
    """
    if not caller:
        return RequestBuckets()

    requests, anomalies = coerce_swap_requests(items)
    buckets = RequestBuckets(anomalies=anomalies)

    for request in requests:
        if request.status is SwapStatus.PENDING:
            if request.to == caller:
                buckets.incoming.append(request)
            elif request.from_ == caller:
                buckets.outgoing.append(request)
        elif request.status is SwapStatus.ACCEPTED:
            buckets.accepted.append(request)
        elif request.status is SwapStatus.COMPLETED:
            buckets.completed.append(request)

    return buckets
