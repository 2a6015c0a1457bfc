"""Unit tests for Profile service layer."""

from datetime import date
from uuid import UUID

import pytest

from core.exceptions import ProfileNotFoundError, UserNotFoundError
from domain.entities.profile import Experience, Profile, ProfileWithUser
from domain.entities.user import UserSummary
from domain.services.profile_service import ProfileService
from tests.unit.fakes import FakeUnitOfWork


@pytest.fixture
def service(uow: FakeUnitOfWork) -> ProfileService:
    return ProfileService(lambda: uow)


@pytest.fixture
def sample_profile(user_id: UUID) -> Profile:
    return Profile(
        user_id=user_id,
        status="Developer",
        skills=["Python"],
        company="Acme",
        social={"twitter": "https://twitter.com/jane"},
    )


def _joined(profile: Profile) -> ProfileWithUser:
    return ProfileWithUser(
        profile=profile,
        user=UserSummary(id=profile.user_id, name="Jane", avatar="//a"),
    )


class TestProfileServiceGet:
    async def test_get_for_user_raises_when_missing(
        self, service: ProfileService, uow: FakeUnitOfWork, user_id: UUID
    ) -> None:
        uow.profiles.get_by_user_with_owner.return_value = None

        with pytest.raises(ProfileNotFoundError):
            await service.get_for_user(user_id)

    async def test_malformed_user_id_is_not_found(
        self, service: ProfileService, uow: FakeUnitOfWork
    ) -> None:
        with pytest.raises(ProfileNotFoundError):
            await service.get_by_user_id("not-a-uuid")

        uow.profiles.get_by_user_with_owner.assert_not_called()

    async def test_get_by_user_id_parses_id(
        self, service: ProfileService, uow: FakeUnitOfWork, sample_profile: Profile
    ) -> None:
        uow.profiles.get_by_user_with_owner.return_value = _joined(sample_profile)

        result = await service.get_by_user_id(str(sample_profile.user_id))

        assert result.profile is sample_profile
        uow.profiles.get_by_user_with_owner.assert_called_once_with(sample_profile.user_id)


class TestProfileServiceUpsert:
    async def test_creates_profile_when_absent(
        self, service: ProfileService, uow: FakeUnitOfWork, user_id: UUID
    ) -> None:
        uow.profiles.get_by_user.return_value = None
        uow.profiles.get_by_user_with_owner.side_effect = lambda uid: _joined(
            uow.profiles.create.call_args.args[0]
        )

        result = await service.upsert(
            user_id,
            status="Developer",
            skills=["Python", "SQL"],
            company="",
            social={"twitter": "https://twitter.com/jane", "youtube": None, "myspace": "x"},
        )

        created: Profile = uow.profiles.create.call_args.args[0]
        assert created.user_id == user_id
        assert created.skills == ["Python", "SQL"]
        assert created.company is None
        assert created.social == {"twitter": "https://twitter.com/jane"}
        assert result.profile is created
        assert uow.committed

    async def test_update_overwrites_only_provided_fields(
        self,
        service: ProfileService,
        uow: FakeUnitOfWork,
        user_id: UUID,
        sample_profile: Profile,
    ) -> None:
        uow.profiles.get_by_user.return_value = sample_profile
        uow.profiles.get_by_user_with_owner.return_value = _joined(sample_profile)

        await service.upsert(
            user_id,
            status="Senior Developer",
            skills=["Go"],
            location="Berlin",
            social={},
        )

        updated: Profile = uow.profiles.update.call_args.args[0]
        assert updated.status == "Senior Developer"
        assert updated.skills == ["Go"]
        assert updated.location == "Berlin"
        assert updated.company == "Acme"
        assert updated.social == {}
        uow.profiles.create.assert_not_called()


    async def test_rejects_deleted_user(
        self, service: ProfileService, uow: FakeUnitOfWork, user_id: UUID
    ) -> None:
        """A token that outlived its account cannot create a profile."""
        uow.users.get.return_value = None

        with pytest.raises(UserNotFoundError):
            await service.upsert(user_id, status="Developer", skills=["Python"])

        uow.profiles.create.assert_not_called()
        uow.profiles.update.assert_not_called()
        assert not uow.committed


class TestProfileServiceExperience:
    async def test_prepends_entry(
        self,
        service: ProfileService,
        uow: FakeUnitOfWork,
        user_id: UUID,
        sample_profile: Profile,
    ) -> None:
        older = Experience(title="Junior", company="A", from_date=date(2018, 1, 1))
        sample_profile.experience = [older]
        uow.profiles.get_by_user.return_value = sample_profile
        uow.profiles.get_by_user_with_owner.return_value = _joined(sample_profile)
        newer = Experience(title="Senior", company="B", from_date=date(2021, 1, 1))

        result = await service.add_experience(user_id, newer)

        assert result.profile.experience == [newer, older]
        assert uow.committed

    async def test_raises_without_profile(
        self, service: ProfileService, uow: FakeUnitOfWork, user_id: UUID
    ) -> None:
        uow.profiles.get_by_user.return_value = None

        with pytest.raises(ProfileNotFoundError):
            await service.add_experience(
                user_id, Experience(title="Dev", company="A", from_date=date(2020, 1, 1))
            )


    async def test_add_experience_rejects_deleted_user(
        self, service: ProfileService, uow: FakeUnitOfWork, user_id: UUID
    ) -> None:
        uow.users.get.return_value = None

        with pytest.raises(UserNotFoundError):
            await service.add_experience(
                user_id, Experience(title="Dev", company="A", from_date=date(2020, 1, 1))
            )

        uow.profiles.update.assert_not_called()


class TestProfileServiceDeleteAccount:
    async def test_deletes_profile_then_user(
        self, service: ProfileService, uow: FakeUnitOfWork, user_id: UUID
    ) -> None:
        await service.delete_account(user_id)

        uow.profiles.delete_by_user.assert_called_once_with(user_id)
        uow.users.delete.assert_called_once_with(user_id)
        uow.posts.delete.assert_not_called()
        assert uow.committed
