"""Pydantic schemas for Post API."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

from api.rest.schemas.common import check_min_length


class PostCreate(BaseModel):
    """Schema for creating a post."""

    model_config = ConfigDict(str_strip_whitespace=True)

    text: str = Field(..., min_length=1)

    @field_validator("text", mode="before")
    @classmethod
    def text_required(cls, v: object) -> object:
        return check_min_length(v, 1, "Text is required")


class CommentCreate(BaseModel):
    """Schema for commenting on a post."""

    model_config = ConfigDict(str_strip_whitespace=True)

    text: str = Field(..., min_length=1)

    @field_validator("text", mode="before")
    @classmethod
    def text_required(cls, v: object) -> object:
        return check_min_length(v, 1, "Text is required")


class LikeResponse(BaseModel):
    """A like on a post."""

    user: UUID


class CommentResponse(BaseModel):
    """A comment on a post."""

    id: UUID
    user: UUID
    text: str
    name: str
    avatar: str
    created_at: datetime


class PostResponse(BaseModel):
    """Schema for Post response."""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": "323e4567-e89b-12d3-a456-426614174000",
                "user": "123e4567-e89b-12d3-a456-426614174000",
                "text": "Hello world",
                "name": "Jane Doe",
                "avatar": "//www.gravatar.com/avatar/9e26471d35a78862c17e467d87cddedf?s=200&r=pg&d=mm",
                "likes": [{"user": "123e4567-e89b-12d3-a456-426614174000"}],
                "comments": [],
                "created_at": "2026-01-28T10:00:00",
            }
        },
    )

    id: UUID
    user: UUID
    text: str
    name: str
    avatar: str
    likes: list[LikeResponse]
    comments: list[CommentResponse]
    created_at: datetime
