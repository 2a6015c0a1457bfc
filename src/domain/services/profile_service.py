"""Profile service layer with business logic."""

from typing import Callable, List, Optional
from uuid import UUID

import structlog

from core.exceptions import ProfileNotFoundError, UserNotFoundError
from domain.entities.profile import SOCIAL_NETWORKS, Experience, Profile, ProfileWithUser
from domain.repositories.unit_of_work import IUnitOfWork
from domain.services.ids import parse_id

logger = structlog.get_logger()


class ProfileService:
    """Service layer for Profile business logic."""

    def __init__(self, uow_factory: Callable[[], IUnitOfWork]) -> None:
        self._uow_factory = uow_factory

    async def get_for_user(self, user_id: UUID) -> ProfileWithUser:
        """Get the caller's profile joined with name/avatar."""
        async with self._uow_factory() as uow:
            joined = await uow.profiles.get_by_user_with_owner(user_id)
            if not joined:
                raise ProfileNotFoundError(str(user_id))
            return joined

    async def get_by_user_id(self, raw_user_id: str) -> ProfileWithUser:
        """Get a profile by its owner's id. Malformed ids count as not found."""
        user_id = parse_id(raw_user_id)
        if user_id is None:
            raise ProfileNotFoundError(raw_user_id)
        return await self.get_for_user(user_id)

    async def get_all(self) -> List[ProfileWithUser]:
        """Get all profiles."""
        async with self._uow_factory() as uow:
            return await uow.profiles.get_all_with_owner()  # type: ignore[no-any-return]

    async def upsert(
        self,
        user_id: UUID,
        status: Optional[str] = None,
        skills: Optional[List[str]] = None,
        company: Optional[str] = None,
        website: Optional[str] = None,
        location: Optional[str] = None,
        bio: Optional[str] = None,
        githubusername: Optional[str] = None,
        social: Optional[dict[str, Optional[str]]] = None,
    ) -> ProfileWithUser:
        """Create the caller's profile, or overwrite the fields provided.

        Empty values are treated as not provided. Social links are rebuilt
        from the provided ones on every call.
        """
        fields = {
            "status": status,
            "skills": skills,
            "company": company,
            "website": website,
            "location": location,
            "bio": bio,
            "githubusername": githubusername,
        }
        provided = {name: value for name, value in fields.items() if value}
        links = {
            network: link
            for network, link in (social or {}).items()
            if network in SOCIAL_NETWORKS and link
        }

        async with self._uow_factory() as uow:
            await self._require_user(uow, user_id)
            profile = await uow.profiles.get_by_user(user_id)

            if profile:
                for name, value in provided.items():
                    setattr(profile, name, value)
                profile.social = links
                await uow.profiles.update(profile)
                logger.info("profile_updated", user_id=str(user_id))
            else:
                profile = Profile(user_id=user_id, social=links, **provided)
                await uow.profiles.create(profile)
                logger.info("profile_created", user_id=str(user_id))

            joined = await uow.profiles.get_by_user_with_owner(user_id)
            await uow.commit()

        if not joined:
            raise ProfileNotFoundError(str(user_id))
        return joined

    async def add_experience(self, user_id: UUID, entry: Experience) -> ProfileWithUser:
        """Prepend an experience entry to the caller's profile."""
        async with self._uow_factory() as uow:
            await self._require_user(uow, user_id)
            profile = await uow.profiles.get_by_user(user_id)
            if not profile:
                raise ProfileNotFoundError(str(user_id))

            profile.add_experience(entry)
            await uow.profiles.update(profile)
            joined = await uow.profiles.get_by_user_with_owner(user_id)
            await uow.commit()

        if not joined:
            raise ProfileNotFoundError(str(user_id))
        return joined

    async def delete_account(self, user_id: UUID) -> None:
        """Delete the caller's profile, then the user.

        The user's posts are left in place.
        """
        async with self._uow_factory() as uow:
            await uow.profiles.delete_by_user(user_id)
            await uow.users.delete(user_id)
            await uow.commit()

        logger.info("account_deleted", user_id=str(user_id))

    async def _require_user(self, uow: IUnitOfWork, user_id: UUID) -> None:
        # A token can outlive its account; never write a profile for a deleted user.
        if not await uow.users.get(user_id):
            raise UserNotFoundError(str(user_id))
