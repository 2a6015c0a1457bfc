"""Profile repository protocol."""

from typing import Protocol
from uuid import UUID

from domain.entities.profile import Profile, ProfileWithUser


class IProfileRepository(Protocol):
    """Repository interface for Profile entities."""

    async def get_by_user(self, user_id: UUID) -> Profile | None:
        """Get the profile owned by a user."""
        ...

    async def get_by_user_with_owner(self, user_id: UUID) -> ProfileWithUser | None:
        """Get the profile owned by a user, joined with the owner's name/avatar."""
        ...

    async def get_all_with_owner(self) -> list[ProfileWithUser]:
        """Get all profiles joined with their owners' name/avatar."""
        ...

    async def create(self, profile: Profile) -> Profile:
        """Create a new profile."""
        ...

    async def update(self, profile: Profile) -> Profile:
        """Replace the stored fields of an existing profile."""
        ...

    async def delete_by_user(self, user_id: UUID) -> bool:
        """Delete the profile owned by a user."""
        ...
