"""Profile repository interface."""

from abc import ABC, abstractmethod
from typing import Dict, Iterable

from founderhub.domain.model.profile import Profile
from founderhub.domain.value import UserId


class ProfileRepository(ABC):
    """Repository for Profile entity."""

    @abstractmethod
    async def find_by_user_ids(
        self, user_ids: Iterable[UserId]
    ) -> Dict[UserId, Profile]:
        """Batch lookup of profiles.

        Args:
            user_ids: User IDs to look up (duplicates allowed)

        Returns:
            Mapping of user ID to profile; users without a profile are absent
        """
        pass

    @abstractmethod
    async def save(self, profile: Profile) -> Profile:
        """Save a profile (create or update)."""
        pass
