"""Unit tests for application settings."""

import pytest
from pydantic import ValidationError

from core.config import Settings


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    for name in ("DATABASE_URL", "JWT_SECRET_KEY", "PORT", "BCRYPT_ROUNDS"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


class TestSettings:
    def test_missing_secret_fails_fast(self, clean_env: pytest.MonkeyPatch) -> None:
        clean_env.setenv("DATABASE_URL", "sqlite+aiosqlite:///:memory:")

        with pytest.raises(ValidationError) as exc_info:
            Settings(_env_file=None)  # type: ignore[call-arg]

        assert "jwt_secret_key" in str(exc_info.value)

    def test_missing_database_url_fails_fast(self, clean_env: pytest.MonkeyPatch) -> None:
        clean_env.setenv("JWT_SECRET_KEY", "s3cret")

        with pytest.raises(ValidationError) as exc_info:
            Settings(_env_file=None)  # type: ignore[call-arg]

        assert "database_url" in str(exc_info.value)

    def test_empty_secret_rejected(self, clean_env: pytest.MonkeyPatch) -> None:
        clean_env.setenv("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
        clean_env.setenv("JWT_SECRET_KEY", "")

        with pytest.raises(ValidationError):
            Settings(_env_file=None)  # type: ignore[call-arg]

    def test_defaults(self, clean_env: pytest.MonkeyPatch) -> None:
        clean_env.setenv("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
        clean_env.setenv("JWT_SECRET_KEY", "s3cret")

        settings = Settings(_env_file=None)  # type: ignore[call-arg]

        assert settings.port == 5000
        assert settings.jwt_expire_seconds == 360000
        assert settings.jwt_algorithm == "HS256"
        assert settings.bcrypt_rounds == 10

    def test_port_from_environment(self, clean_env: pytest.MonkeyPatch) -> None:
        clean_env.setenv("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
        clean_env.setenv("JWT_SECRET_KEY", "s3cret")
        clean_env.setenv("PORT", "8080")

        assert Settings(_env_file=None).port == 8080  # type: ignore[call-arg]

    def test_postgres_url_gets_async_driver(self, clean_env: pytest.MonkeyPatch) -> None:
        clean_env.setenv("DATABASE_URL", "postgresql://u:p@db:5432/devconnector")
        clean_env.setenv("JWT_SECRET_KEY", "s3cret")

        settings = Settings(_env_file=None)  # type: ignore[call-arg]

        assert settings.async_database_url == "postgresql+asyncpg://u:p@db:5432/devconnector"
