"""User service layer: registration, login and identity lookup."""

from typing import Callable
from uuid import UUID

import structlog
from sqlalchemy.exc import IntegrityError

from core.exceptions import (
    InvalidCredentialsError,
    UserAlreadyExistsError,
    UserNotFoundError,
)
from domain.entities.user import User
from domain.repositories.unit_of_work import IUnitOfWork
from infrastructure.auth.provider import IAuthProvider, IPasswordHasher, TokenUser

logger = structlog.get_logger()


class UserService:
    """Service layer for User business logic."""

    def __init__(
        self,
        uow_factory: Callable[[], IUnitOfWork],
        password_hasher: IPasswordHasher,
        auth_provider: IAuthProvider,
    ) -> None:
        self._uow_factory = uow_factory
        self._password_hasher = password_hasher
        self._auth_provider = auth_provider

    async def register(self, name: str, email: str, password: str) -> str:
        """Create a user and return a signed token for it."""
        async with self._uow_factory() as uow:
            if await uow.users.get_by_email(email):
                raise UserAlreadyExistsError()

            user = User(
                name=name,
                email=email,
                password=await self._password_hasher.hash(password),
            )

            try:
                created = await uow.users.create(user)
                await uow.commit()
            except IntegrityError as exc:
                await uow.rollback()
                # A concurrent registration won the unique email index.
                orig = str(exc.orig).lower() if exc.orig else ""
                if "unique" in orig or "duplicate" in orig:
                    raise UserAlreadyExistsError() from exc
                raise

        logger.info("user_registered", user_id=str(created.id))
        return self._auth_provider.create_token(TokenUser(id=created.id))

    async def login(self, email: str, password: str) -> str:
        """Check credentials and return a signed token.

        Unknown email and wrong password raise the same error.
        """
        async with self._uow_factory() as uow:
            user = await uow.users.get_by_email(email)

        if not user:
            logger.info("login_failed", reason="unknown_email")
            raise InvalidCredentialsError()

        if not await self._password_hasher.verify(password, user.password):
            logger.info("login_failed", reason="password_mismatch", user_id=str(user.id))
            raise InvalidCredentialsError()

        return self._auth_provider.create_token(TokenUser(id=user.id))

    async def get_by_id(self, user_id: UUID) -> User:
        """Get a user by ID."""
        async with self._uow_factory() as uow:
            user = await uow.users.get(user_id)
            if not user:
                raise UserNotFoundError(str(user_id))
            return user
