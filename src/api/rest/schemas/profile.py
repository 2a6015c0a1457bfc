"""Pydantic schemas for Profile API."""

from datetime import date, datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

from api.rest.schemas.common import check_min_length
from api.rest.schemas.user import UserSummaryResponse


class ProfileUpsert(BaseModel):
    """Schema for creating or updating the caller's profile.

    ``skills`` accepts a comma-separated string or a list of strings.
    """

    model_config = ConfigDict(str_strip_whitespace=True)

    status: str = Field(..., min_length=1, max_length=255)
    skills: list[str]
    company: str | None = Field(None, max_length=255)
    website: str | None = Field(None, max_length=500)
    location: str | None = Field(None, max_length=255)
    bio: str | None = None
    githubusername: str | None = Field(None, max_length=100)
    youtube: str | None = Field(None, max_length=500)
    twitter: str | None = Field(None, max_length=500)
    facebook: str | None = Field(None, max_length=500)
    linkedin: str | None = Field(None, max_length=500)
    instagram: str | None = Field(None, max_length=500)

    @field_validator("status", mode="before")
    @classmethod
    def status_required(cls, v: object) -> object:
        return check_min_length(v, 1, "Status is required")

    @field_validator("skills", mode="before")
    @classmethod
    def split_skills(cls, v: object) -> object:
        if isinstance(v, str):
            v = v.split(",")
        if isinstance(v, list):
            v = [s.strip() if isinstance(s, str) else s for s in v]
            v = [s for s in v if s != ""]
            if not v:
                raise ValueError("Skills is required")
        return v

    def social_links(self) -> dict[str, str | None]:
        return {
            "youtube": self.youtube,
            "twitter": self.twitter,
            "facebook": self.facebook,
            "linkedin": self.linkedin,
            "instagram": self.instagram,
        }


class ExperienceCreate(BaseModel):
    """Schema for adding an experience entry."""

    model_config = ConfigDict(populate_by_name=True, str_strip_whitespace=True)

    title: str = Field(..., min_length=1, max_length=255)
    company: str = Field(..., min_length=1, max_length=255)
    from_date: date = Field(..., alias="from")
    to_date: date | None = Field(None, alias="to")
    location: str | None = Field(None, max_length=255)
    current: bool = False
    description: str | None = None

    @field_validator("title", mode="before")
    @classmethod
    def title_required(cls, v: object) -> object:
        return check_min_length(v, 1, "Title is required")

    @field_validator("company", mode="before")
    @classmethod
    def company_required(cls, v: object) -> object:
        return check_min_length(v, 1, "Company is required")

    @field_validator("from_date", mode="before")
    @classmethod
    def from_required(cls, v: object) -> object:
        return check_min_length(v, 1, "From date is required")


class ExperienceResponse(BaseModel):
    """Schema for an experience entry."""

    id: UUID
    title: str
    company: str
    location: str | None
    from_date: date = Field(..., serialization_alias="from")
    to_date: date | None = Field(None, serialization_alias="to")
    current: bool
    description: str | None


class SocialLinks(BaseModel):
    """Social network links on a profile."""

    youtube: str | None = None
    twitter: str | None = None
    facebook: str | None = None
    linkedin: str | None = None
    instagram: str | None = None


class ProfileResponse(BaseModel):
    """Schema for Profile response, joined with the owner's name/avatar."""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": "223e4567-e89b-12d3-a456-426614174000",
                "user": {
                    "id": "123e4567-e89b-12d3-a456-426614174000",
                    "name": "Jane Doe",
                    "avatar": "//www.gravatar.com/avatar/9e26471d35a78862c17e467d87cddedf?s=200&r=pg&d=mm",
                },
                "status": "Developer",
                "skills": ["Python", "SQL"],
                "company": "Acme",
                "website": None,
                "location": "Berlin",
                "bio": None,
                "githubusername": "janedoe",
                "social": {"twitter": "https://twitter.com/janedoe"},
                "experience": [],
                "created_at": "2026-01-28T10:00:00",
            }
        },
    )

    id: UUID
    user: UserSummaryResponse
    status: str
    skills: list[str]
    company: str | None
    website: str | None
    location: str | None
    bio: str | None
    githubusername: str | None
    social: SocialLinks
    experience: list[ExperienceResponse]
    created_at: datetime
