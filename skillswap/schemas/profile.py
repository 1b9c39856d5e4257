"""
Profile schemas.
"""
from typing import List, Optional

from pydantic import EmailStr, Field, field_validator

from skillswap.schemas.base import BaseSchema, RequiredText


class Skill(BaseSchema):
    """A skill, compared by exact name."""

    name: str


class UserProfile(BaseSchema):
    """
    User profile as returned by the actor.

    principal is an extension of the actor's record: without it a directory
    entry cannot be addressed by a swap request.
    """

    principal: Optional[str] = None
    name: str
    email: str
    location: str
    average_rating: float = 0.0  # 0 when unrated
    skills_offered: List[Skill] = []
    skills_wanted: List[Skill] = []


class ProfileForm(BaseSchema):
    """Profile setup / edit form submitted by the caller."""

    name: RequiredText
    email: EmailStr
    location: RequiredText
    skills_offered: List[Skill] = Field(..., min_length=1)
    skills_wanted: List[Skill] = Field(..., min_length=1)

    @field_validator("email", mode="before")
    @classmethod
    def _strip_email(cls, value):
        return value.strip() if isinstance(value, str) else value

    @field_validator("skills_offered", "skills_wanted")
    @classmethod
    def _unique_trimmed_skills(cls, skills: List[Skill]) -> List[Skill]:
        seen = set()
        cleaned = []
        for skill in skills:
            name = skill.name.strip()
            if not name:
                raise ValueError("Skill name cannot be blank")
            if name in seen:
                raise ValueError(f"Skill already added: {name}")
            seen.add(name)
            cleaned.append(Skill(name=name))
        return cleaned

    def to_profile(self, *, average_rating: float = 0.0, principal: Optional[str] = None) -> UserProfile:
        """Build the record the actor stores, keeping the existing rating."""
        return UserProfile(
            principal=principal,
            name=self.name,
            email=str(self.email),
            location=self.location,
            average_rating=average_rating,
            skills_offered=list(self.skills_offered),
            skills_wanted=list(self.skills_wanted),
        )


class UserCard(BaseSchema):
    """Directory / match card for a single user."""

    principal: Optional[str] = None
    name: str
    initials: str
    location: str
    average_rating: float
    rating_label: str  # "New" or one decimal
    skills_offered: List[str] = []
    skills_wanted: List[str] = []
    more_offered: int = 0
    more_wanted: int = 0
    can_request: bool = False


class ProfileView(BaseSchema):
    """The caller's own profile, as shown on the dashboard header."""

    profile: UserProfile
    initials: str
    rating_label: str
