"""User domain entity."""

import hashlib
from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID, uuid4

GRAVATAR_URL = "//www.gravatar.com/avatar/{digest}?s=200&r=pg&d=mm"


def normalize_email(email: str) -> str:
    """Canonical form used for storage and lookups (case-insensitive)."""
    return email.strip().lower()


def gravatar_url(email: str) -> str:
    """Build the Gravatar avatar URL for an email address.

    200px, PG rated, "mystery man" fallback for addresses with no image.
    """
    digest = hashlib.md5(
        normalize_email(email).encode("utf-8"), usedforsecurity=False
    ).hexdigest()
    return GRAVATAR_URL.format(digest=digest)


@dataclass
class User:
    """Domain entity for a registered user.

    ``password`` holds the bcrypt hash and must never leave the service layer.
    """

    name: str
    email: str
    password: str
    id: UUID = field(default_factory=uuid4)
    avatar: str = ""
    created_at: datetime = field(default_factory=datetime.utcnow)

    def __post_init__(self) -> None:
        """Normalize email and derive the avatar once."""
        self.email = normalize_email(self.email)
        if not self.avatar:
            self.avatar = gravatar_url(self.email)


@dataclass(frozen=True, slots=True)
class UserSummary:
    """Read-only value object: the public name/avatar of a user."""

    id: UUID
    name: str
    avatar: str
