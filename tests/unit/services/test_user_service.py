"""Unit tests for User service layer."""

from uuid import UUID

import pytest
from sqlalchemy.exc import IntegrityError

from core.exceptions import (
    InvalidCredentialsError,
    UserAlreadyExistsError,
    UserNotFoundError,
)
from domain.entities.user import User
from domain.services.user_service import UserService
from infrastructure.auth.jwt_provider import JWTAuthProvider
from tests.unit.fakes import FakePasswordHasher, FakeUnitOfWork


@pytest.fixture
def auth_provider() -> JWTAuthProvider:
    return JWTAuthProvider(secret_key="test-secret", expire_seconds=60)


@pytest.fixture
def service(uow: FakeUnitOfWork, auth_provider: JWTAuthProvider) -> UserService:
    """Create service with fake UoW and a reversible hasher."""
    return UserService(
        lambda: uow,
        password_hasher=FakePasswordHasher(),
        auth_provider=auth_provider,
    )


@pytest.fixture
def stored_user() -> User:
    return User(name="Jane", email="jane@example.com", password="hashed:secret1")


class TestUserServiceRegister:
    async def test_creates_user_and_returns_token(
        self,
        service: UserService,
        uow: FakeUnitOfWork,
        auth_provider: JWTAuthProvider,
    ) -> None:
        uow.users.get_by_email.return_value = None
        uow.users.create.side_effect = lambda user: user

        token = await service.register("Jane", "Jane@Example.com", "secret1")

        created: User = uow.users.create.call_args.args[0]
        assert created.email == "jane@example.com"
        assert created.password == "hashed:secret1"
        assert created.avatar.startswith("//www.gravatar.com/avatar/")
        assert uow.committed

        token_user = await auth_provider.validate_token(token)
        assert token_user is not None
        assert token_user.id == created.id

    async def test_rejects_duplicate_email(
        self, service: UserService, uow: FakeUnitOfWork, stored_user: User
    ) -> None:
        uow.users.get_by_email.return_value = stored_user

        with pytest.raises(UserAlreadyExistsError):
            await service.register("Jane", "jane@example.com", "secret1")

        uow.users.create.assert_not_called()
        assert not uow.committed

    async def test_concurrent_duplicate_maps_to_already_exists(
        self, service: UserService, uow: FakeUnitOfWork
    ) -> None:
        """Losing the unique-index race reports a duplicate, not a server error."""
        uow.users.get_by_email.return_value = None
        uow.users.create.side_effect = IntegrityError(
            "INSERT ...", {}, Exception("UNIQUE constraint failed: users.email")
        )

        with pytest.raises(UserAlreadyExistsError):
            await service.register("Jane", "jane@example.com", "secret1")

        assert uow.rolled_back
        assert not uow.committed

    async def test_other_integrity_errors_are_reraised(
        self, service: UserService, uow: FakeUnitOfWork
    ) -> None:
        uow.users.get_by_email.return_value = None
        uow.users.create.side_effect = IntegrityError(
            "INSERT ...", {}, Exception("NOT NULL constraint failed: users.name")
        )

        with pytest.raises(IntegrityError):
            await service.register("Jane", "jane@example.com", "secret1")


class TestUserServiceLogin:
    async def test_returns_token_for_valid_credentials(
        self,
        service: UserService,
        uow: FakeUnitOfWork,
        stored_user: User,
        auth_provider: JWTAuthProvider,
    ) -> None:
        uow.users.get_by_email.return_value = stored_user

        token = await service.login("jane@example.com", "secret1")

        token_user = await auth_provider.validate_token(token)
        assert token_user is not None
        assert token_user.id == stored_user.id

    async def test_unknown_email_and_wrong_password_fail_identically(
        self, service: UserService, uow: FakeUnitOfWork, stored_user: User
    ) -> None:
        uow.users.get_by_email.return_value = None
        with pytest.raises(InvalidCredentialsError) as unknown:
            await service.login("nobody@example.com", "secret1")

        uow.users.get_by_email.return_value = stored_user
        with pytest.raises(InvalidCredentialsError) as mismatch:
            await service.login("jane@example.com", "wrong")

        assert unknown.value.message == mismatch.value.message == "Invalid Credentials"
        assert unknown.value.status_code == mismatch.value.status_code


class TestUserServiceGetById:
    async def test_returns_user(
        self, service: UserService, uow: FakeUnitOfWork, stored_user: User
    ) -> None:
        uow.users.get.return_value = stored_user

        assert await service.get_by_id(stored_user.id) is stored_user

    async def test_raises_when_missing(
        self, service: UserService, uow: FakeUnitOfWork, user_id: UUID
    ) -> None:
        uow.users.get.return_value = None

        with pytest.raises(UserNotFoundError):
            await service.get_by_id(user_id)
