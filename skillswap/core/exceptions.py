"""
Custom exceptions for the application.
All API exceptions should inherit from APIException for consistent error handling.
"""
from typing import Optional, Any


class APIException(Exception):
    """
    Base exception for all API errors.
    Provides consistent error response format.
    """

    def __init__(
        self,
        status_code: int,
        code: str,
        message: str,
        details: Optional[Any] = None,
    ):
        self.status_code = status_code
        self.code = code
        self.message = message
        self.details = details
        super().__init__(self.message)


class BadRequestException(APIException):
    """400 Bad Request"""

    def __init__(self, message: str = "Bad request", code: str = "BAD_REQUEST"):
        super().__init__(400, code, message)


class UnauthorizedException(APIException):
    """401 Unauthorized"""

    def __init__(self, message: str = "Unauthorized", code: str = "UNAUTHORIZED"):
        super().__init__(401, code, message)


class ForbiddenException(APIException):
    """403 Forbidden"""

    def __init__(self, message: str = "Forbidden", code: str = "FORBIDDEN"):
        super().__init__(403, code, message)


class NotFoundException(APIException):
    """404 Not Found"""

    def __init__(self, message: str = "Resource not found", code: str = "NOT_FOUND"):
        super().__init__(404, code, message)


class ConflictException(APIException):
    """409 Conflict"""

    def __init__(self, message: str = "Resource conflict", code: str = "CONFLICT"):
        super().__init__(409, code, message)


class ValidationException(APIException):
    """422 Validation Error"""

    def __init__(
        self,
        message: str = "Validation error",
        code: str = "VALIDATION_ERROR",
        details: Optional[Any] = None,
    ):
        super().__init__(422, code, message, details)


# Remote actor
class ActorUnavailableException(APIException):
    """502 - the actor gateway failed, timed out, or answered with an error."""

    def __init__(self, method: str, reason: str):
        super().__init__(
            502,
            "ACTOR_UNAVAILABLE",
            f"Actor call '{method}' failed",
            details={"method": method, "reason": reason},
        )


# Swap lifecycle
class InvalidTransitionException(ConflictException):
    """Swap request status cannot move this way"""

    def __init__(self, message: str):
        super().__init__(message=message, code="INVALID_TRANSITION")


class SwapRequestNotFoundException(NotFoundException):
    """Swap request not found"""

    def __init__(self):
        super().__init__(message="Swap request not found", code="SWAP_REQUEST_NOT_FOUND")


class MissingPrincipalException(ValidationException):
    """Directory entry carries no identity, so it cannot be addressed"""

    def __init__(self):
        super().__init__(
            message="Unable to send request: user principal not available",
            code="MISSING_PRINCIPAL",
        )


# Profiles
class ProfileNotFoundException(NotFoundException):
    """Profile not found"""

    def __init__(self):
        super().__init__(message="Profile not found", code="PROFILE_NOT_FOUND")


# Reviews
class NoCompletedSwapsException(ConflictException):
    """Nothing to review yet"""

    def __init__(self):
        super().__init__(message="No completed swaps", code="NO_COMPLETED_SWAPS")


class SwapNotReviewableException(ValidationException):
    """Chosen swap is not among the completed swaps"""

    def __init__(self, swap_request_id: int):
        super().__init__(
            message="Only completed swaps can be reviewed",
            code="SWAP_NOT_REVIEWABLE",
            details={"swap_request_id": swap_request_id},
        )
