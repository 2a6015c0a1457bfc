"""SQLAlchemy implementation of Profile repository."""

from datetime import date
from typing import Any
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from domain.entities.profile import Experience, Profile, ProfileWithUser
from domain.entities.user import UserSummary
from infrastructure.database.models import ProfileModel, UserModel


class SQLAlchemyProfileRepository:
    """SQLAlchemy implementation of IProfileRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get_by_user(self, user_id: UUID) -> Profile | None:
        """Get the profile owned by a user."""
        model = await self._get_model_by_user(user_id)
        return self._to_entity(model) if model else None

    async def get_by_user_with_owner(self, user_id: UUID) -> ProfileWithUser | None:
        """Get a user's profile joined with the owner's name/avatar."""
        stmt = (
            select(ProfileModel, UserModel)
            .join(UserModel, ProfileModel.user_id == UserModel.id)
            .where(ProfileModel.user_id == user_id)
        )
        result = await self._session.execute(stmt)
        row = result.one_or_none()
        if not row:
            return None
        profile_model, user_model = row
        return self._to_joined(profile_model, user_model)

    async def get_all_with_owner(self) -> list[ProfileWithUser]:
        """Get all profiles joined with their owners' name/avatar."""
        stmt = (
            select(ProfileModel, UserModel)
            .join(UserModel, ProfileModel.user_id == UserModel.id)
            .order_by(ProfileModel.created_at)
        )
        result = await self._session.execute(stmt)
        return [
            self._to_joined(profile_model, user_model)
            for profile_model, user_model in result
        ]

    async def create(self, profile: Profile) -> Profile:
        """Create a new profile."""
        model = self._to_model(profile)
        self._session.add(model)
        await self._session.flush()
        await self._session.refresh(model)
        return self._to_entity(model)

    async def update(self, profile: Profile) -> Profile:
        """Replace the stored fields of an existing profile."""
        stmt = select(ProfileModel).where(ProfileModel.id == profile.id)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if not model:
            raise ValueError(f"Profile {profile.id} not found")

        model.company = profile.company
        model.website = profile.website
        model.location = profile.location
        model.status = profile.status
        model.skills = list(profile.skills)
        model.bio = profile.bio
        model.githubusername = profile.githubusername
        model.social = dict(profile.social)
        model.experience = [_experience_to_doc(e) for e in profile.experience]

        await self._session.flush()
        return self._to_entity(model)

    async def delete_by_user(self, user_id: UUID) -> bool:
        """Delete the profile owned by a user."""
        model = await self._get_model_by_user(user_id)

        if not model:
            return False

        await self._session.delete(model)
        await self._session.flush()
        return True

    async def _get_model_by_user(self, user_id: UUID) -> ProfileModel | None:
        stmt = select(ProfileModel).where(ProfileModel.user_id == user_id)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    def _to_joined(self, profile_model: ProfileModel, user_model: UserModel) -> ProfileWithUser:
        return ProfileWithUser(
            profile=self._to_entity(profile_model),
            user=UserSummary(
                id=user_model.id,
                name=user_model.name,
                avatar=user_model.avatar,
            ),
        )

    def _to_entity(self, model: ProfileModel) -> Profile:
        """Convert ORM model to domain entity."""
        return Profile(
            id=model.id,
            user_id=model.user_id,
            company=model.company,
            website=model.website,
            location=model.location,
            status=model.status,
            skills=list(model.skills or []),
            bio=model.bio,
            githubusername=model.githubusername,
            social=dict(model.social or {}),
            experience=[_experience_from_doc(doc) for doc in model.experience or []],
            created_at=model.created_at,
        )

    def _to_model(self, entity: Profile) -> ProfileModel:
        """Convert domain entity to ORM model."""
        return ProfileModel(
            id=entity.id,
            user_id=entity.user_id,
            company=entity.company,
            website=entity.website,
            location=entity.location,
            status=entity.status,
            skills=list(entity.skills),
            bio=entity.bio,
            githubusername=entity.githubusername,
            social=dict(entity.social),
            experience=[_experience_to_doc(e) for e in entity.experience],
            created_at=entity.created_at,
        )


def _experience_to_doc(entry: Experience) -> dict[str, Any]:
    return {
        "id": str(entry.id),
        "title": entry.title,
        "company": entry.company,
        "location": entry.location,
        "from": entry.from_date.isoformat(),
        "to": entry.to_date.isoformat() if entry.to_date else None,
        "current": entry.current,
        "description": entry.description,
    }


def _experience_from_doc(doc: dict[str, Any]) -> Experience:
    return Experience(
        id=UUID(doc["id"]),
        title=doc["title"],
        company=doc["company"],
        location=doc.get("location"),
        from_date=date.fromisoformat(doc["from"]),
        to_date=date.fromisoformat(doc["to"]) if doc.get("to") else None,
        current=bool(doc.get("current", False)),
        description=doc.get("description"),
    )
