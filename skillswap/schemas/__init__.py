"""
Pydantic schemas for actor records, forms and page views.
"""
from skillswap.schemas.base import (
    BaseSchema,
    MessageResponse,
    ErrorResponse,
    RequiredText,
)
from skillswap.schemas.profile import (
    Skill,
    UserProfile,
    ProfileForm,
    UserCard,
    ProfileView,
)
from skillswap.schemas.swap import (
    SwapStatus,
    SwapAction,
    SwapRequest,
    MalformedSwapRequest,
    RequestBuckets,
    RequestCard,
    RequestTab,
    RequestsPage,
    SendSwapRequestForm,
    AcceptSwapRequestForm,
    SwapRequestCreated,
)
from skillswap.schemas.review import (
    Review,
    ReviewForm,
    EligibleSwap,
    ReviewEligibility,
    ReviewCard,
    ReviewsPage,
)
from skillswap.schemas.directory import (
    SortKey,
    DirectoryQuery,
    DirectoryPage,
)
from skillswap.schemas.dashboard import (
    DashboardStats,
    DashboardResponse,
)

__all__ = [
    # Base
    "BaseSchema",
    "MessageResponse",
    "ErrorResponse",
    "RequiredText",
    # Profile
    "Skill",
    "UserProfile",
    "ProfileForm",
    "UserCard",
    "ProfileView",
    # Swap
    "SwapStatus",
    "SwapAction",
    "SwapRequest",
    "MalformedSwapRequest",
    "RequestBuckets",
    "RequestCard",
    "RequestTab",
    "RequestsPage",
    "SendSwapRequestForm",
    "AcceptSwapRequestForm",
    "SwapRequestCreated",
    # Review
    "Review",
    "ReviewForm",
    "EligibleSwap",
    "ReviewEligibility",
    "ReviewCard",
    "ReviewsPage",
    # Directory
    "SortKey",
    "DirectoryQuery",
    "DirectoryPage",
    # Dashboard
    "DashboardStats",
    "DashboardResponse",
]
