"""
Service layer - business logic and orchestration.

The classifier, eligibility and directory modules are pure functions over
data already fetched. The *Service classes orchestrate repositories and
those functions into page views.

RULE: Routes call services. Services call repositories. Never the reverse.
"""
from skillswap.services.profile_service import ProfileService
from skillswap.services.directory_service import DirectoryService
from skillswap.services.swap_service import SwapService
from skillswap.services.review_service import ReviewService
from skillswap.services.dashboard_service import DashboardService
from skillswap.services.request_classifier import classify_requests, coerce_swap_requests
from skillswap.services.review_eligibility import build_eligibility, select_reviewable_swaps
from skillswap.services.directory_filter import apply_directory_pipeline
from skillswap.services.swap_lifecycle import apply_transition, next_status
from skillswap.services.swap_anomalies import read_swap_requests, report_anomalies

__all__ = [
    "ProfileService",
    "DirectoryService",
    "SwapService",
    "ReviewService",
    "DashboardService",
    "classify_requests",
    "coerce_swap_requests",
    "build_eligibility",
    "select_reviewable_swaps",
    "apply_directory_pipeline",
    "apply_transition",
    "next_status",
    "read_swap_requests",
    "report_anomalies",
]
