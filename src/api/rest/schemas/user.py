"""Pydantic schemas for user registration, login and identity."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator

from api.rest.schemas.common import check_email, check_min_length
from infrastructure.auth.password import MAX_PASSWORD_BYTES

PASSWORD_MESSAGE = "Please enter a password with 6 or more characters"


class UserCreate(BaseModel):
    """Schema for registering a user."""

    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(..., min_length=1, max_length=100)
    email: EmailStr
    password: str = Field(..., min_length=6, max_length=72)

    @field_validator("name", mode="before")
    @classmethod
    def name_required(cls, v: object) -> object:
        return check_min_length(v, 1, "Name is required")

    @field_validator("email", mode="before")
    @classmethod
    def email_valid(cls, v: object) -> object:
        return check_email(v)

    @field_validator("password", mode="before")
    @classmethod
    def password_length(cls, v: object) -> object:
        v = check_min_length(v, 6, PASSWORD_MESSAGE)
        if isinstance(v, str) and len(v.strip().encode("utf-8")) > MAX_PASSWORD_BYTES:
            raise ValueError(f"Password cannot be longer than {MAX_PASSWORD_BYTES} bytes")
        return v


class LoginRequest(BaseModel):
    """Schema for logging in."""

    email: EmailStr
    password: str = Field(..., min_length=1)

    @field_validator("email", mode="before")
    @classmethod
    def email_valid(cls, v: object) -> object:
        return check_email(v)

    @field_validator("password", mode="before")
    @classmethod
    def password_required(cls, v: object) -> object:
        return check_min_length(v, 1, "Password is required")


class TokenResponse(BaseModel):
    """Signed auth token returned on register/login."""

    token: str


class UserResponse(BaseModel):
    """Schema for the authenticated user. Never includes the password."""

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            "example": {
                "id": "123e4567-e89b-12d3-a456-426614174000",
                "name": "Jane Doe",
                "email": "jane@example.com",
                "avatar": "//www.gravatar.com/avatar/9e26471d35a78862c17e467d87cddedf?s=200&r=pg&d=mm",
                "created_at": "2026-01-28T10:00:00",
            }
        },
    )

    id: UUID
    name: str
    email: str
    avatar: str
    created_at: datetime


class UserSummaryResponse(BaseModel):
    """Owner name/avatar joined into profiles."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
    avatar: str
