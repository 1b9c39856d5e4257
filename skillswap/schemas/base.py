"""
Base schemas and common response models.

Field names are snake_case in Python and camelCase on the wire, matching the
actor's record shapes (averageRating, skillsOffered, sessionTime, ...).
"""
from typing import Annotated, Optional

from pydantic import BaseModel, ConfigDict, StringConstraints
from pydantic.alias_generators import to_camel

# Non-blank text, surrounding whitespace trimmed
RequiredText = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]


class BaseSchema(BaseModel):
    """Base schema with common configuration."""

    model_config = ConfigDict(
        from_attributes=True,
        populate_by_name=True,
        alias_generator=to_camel,
    )


class MessageResponse(BaseSchema):
    """Simple message response."""

    message: str


class ErrorResponse(BaseSchema):
    """Error response format."""

    error: str
    message: str
    details: Optional[dict] = None
