"""
Reporting for swap request records the classifier could not read.

The pure core only collects anomalies; every view that reads the caller's
requests reports what it skipped through here.
"""
from typing import Any, Iterable, List, Optional, Tuple

from skillswap.core.logging import get_logger
from skillswap.schemas.swap import MalformedSwapRequest, SwapRequest
from skillswap.services.request_classifier import coerce_swap_requests

logger = get_logger(__name__)


def report_anomalies(anomalies: List[MalformedSwapRequest], view: str) -> None:
    for anomaly in anomalies:
        logger.warning(
            "swap_request_anomaly",
            view=view,
            request_id=anomaly.id,
            raw_status=anomaly.raw_status,
            reason=anomaly.reason,
        )


def read_swap_requests(
    records: Optional[Iterable[Any]],
    view: str,
) -> Tuple[List[SwapRequest], List[MalformedSwapRequest]]:
    """coerce_swap_requests, logging each anomaly against the view that hit it."""
    requests, anomalies = coerce_swap_requests(records)
    report_anomalies(anomalies, view)
    return requests, anomalies
