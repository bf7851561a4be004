"""PostgreSQL implementation of Profile repository."""

from typing import Dict, Iterable

from sqlalchemy import select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from founderhub.domain.model import Profile
from founderhub.domain.repository import ProfileRepository
from founderhub.domain.value import UserId
from founderhub.persistence.mappers import profile_to_dict, row_to_profile
from founderhub.persistence.tables import profiles_table


class PostgresProfileRepository(ProfileRepository):
    """PostgreSQL implementation of ProfileRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_user_ids(
        self, user_ids: Iterable[UserId]
    ) -> Dict[UserId, Profile]:
        """Batch lookup in a single query."""
        ids = list(set(user_ids))
        if not ids:
            return {}

        stmt = select(profiles_table).where(profiles_table.c.user_id.in_(ids))
        result = await self.session.execute(stmt)
        profiles = [row_to_profile(row._asdict()) for row in result.fetchall()]
        return {profile.user_id: profile for profile in profiles}

    async def save(self, profile: Profile) -> Profile:
        """Upsert a profile."""
        values = profile_to_dict(profile)
        stmt = insert(profiles_table).values(**values)
        stmt = stmt.on_conflict_do_update(
            index_elements=[profiles_table.c.user_id],
            set_={
                "full_name": stmt.excluded.full_name,
                "avatar_url": stmt.excluded.avatar_url,
                "updated_at": stmt.excluded.updated_at,
            },
        ).returning(profiles_table)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        await self.session.flush()
        return row_to_profile(row._asdict())
