"""JWT authentication provider implementation.

Tokens are HS256-signed with a shared secret and carry the user id:
    {
        "user": { "id": "user-uuid" },
        "iat": 1234567890,
        "exp": 1234927890
    }
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Any, Optional
from uuid import UUID

from jose import JWTError, jwt

from core.config import Settings
from infrastructure.auth.provider import TokenUser

logger = logging.getLogger(__name__)


class JWTAuthProvider:
    """JWT-based authentication provider.

    Bad signature, expiry and malformed input all yield the same ``None``
    result from ``validate_token``.
    """

    def __init__(
        self,
        secret_key: str,
        algorithm: str = "HS256",
        expire_seconds: int = 360000,
    ) -> None:
        self._secret_key = secret_key
        self._algorithm = algorithm
        self._expire_seconds = expire_seconds

    @classmethod
    def from_settings(cls, settings: Settings) -> "JWTAuthProvider":
        """Build a provider from the application settings."""
        return cls(
            secret_key=settings.jwt_secret_key,
            algorithm=settings.jwt_algorithm,
            expire_seconds=settings.jwt_expire_seconds,
        )

    async def validate_token(self, token: str) -> Optional[TokenUser]:
        """
        Validate a JWT token and extract the user id.

        Args:
            token: The JWT to validate

        Returns:
            TokenUser if valid, None if invalid or expired
        """
        try:
            payload = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self._algorithm],
            )
        except JWTError:
            return None

        user_id = _extract_user_id(payload)
        if user_id is None:
            logger.debug("Token verified but carries no usable user id")
            return None

        return TokenUser(id=user_id)

    def create_token(self, user: TokenUser) -> str:
        """
        Create a signed JWT for a user.

        Args:
            user: The user to create a token for

        Returns:
            The generated JWT string
        """
        issued_at = datetime.now(timezone.utc)
        payload: dict[str, Any] = {
            "user": {"id": str(user.id)},
            "iat": issued_at,
            "exp": issued_at + timedelta(seconds=self._expire_seconds),
        }

        return jwt.encode(payload, self._secret_key, algorithm=self._algorithm)


def _extract_user_id(payload: dict[str, Any]) -> UUID | None:
    user = payload.get("user")
    if not isinstance(user, dict):
        return None

    raw_id = user.get("id")
    if not raw_id:
        return None

    try:
        return UUID(str(raw_id))
    except ValueError:
        return None
