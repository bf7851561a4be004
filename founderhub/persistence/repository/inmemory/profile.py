"""In-memory profile repository for testing."""

from typing import Iterable

from founderhub.domain.model.profile import Profile
from founderhub.domain.repository.profile import ProfileRepository
from founderhub.domain.value import UserId


class InMemoryProfileRepository(ProfileRepository):
    """In-memory implementation of ProfileRepository for testing."""

    def __init__(self) -> None:
        self._profiles: dict[UserId, Profile] = {}

    async def find_by_user_ids(
        self, user_ids: Iterable[UserId]
    ) -> dict[UserId, Profile]:
        return {
            user_id: self._profiles[user_id]
            for user_id in set(user_ids)
            if user_id in self._profiles
        }

    async def save(self, profile: Profile) -> Profile:
        self._profiles[profile.user_id] = profile
        return profile
