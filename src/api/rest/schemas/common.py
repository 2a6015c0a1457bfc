"""Common Pydantic schemas shared across the API."""

from typing import Any

from pydantic import BaseModel, validate_email
from pydantic_core import PydanticCustomError


class ErrorResponse(BaseModel):
    """Standardized error response."""

    error_code: str
    message: str
    details: Any | None = None


class FieldError(BaseModel):
    """One rejected request field."""

    field: str
    message: str


class MessageResponse(BaseModel):
    """Simple message response."""

    message: str


def check_min_length(value: object, min_length: int, message: str) -> object:
    """Reject a string shorter than ``min_length`` once trimmed, with ``message``.

    Non-string input is passed through for the field's own type check.
    """
    if isinstance(value, str) and len(value.strip()) < min_length:
        raise ValueError(message)
    return value


def check_email(value: object) -> object:
    """Reject a malformed email address with a readable message."""
    if isinstance(value, str):
        try:
            validate_email(value.strip())
        except PydanticCustomError:
            raise ValueError("Please include a valid email") from None
    return value
