"""
User Preferences Repository

Stores one derived preference snapshot per user.
"""

from typing import Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from suggestion_engine.infrastructure.db.repositories.base_repository import BaseRepository
from suggestion_engine.infrastructure.db.models.base import utc_now
from suggestion_engine.infrastructure.db.models.user_preferences import (
    UserPreferences,
    UserPreferencesUpsert,
)
from suggestion_engine.infrastructure.exceptions import DatabaseError


class UserPreferencesRepository(BaseRepository[UserPreferences, UserPreferencesUpsert]):
    """Repository for preference snapshots."""

    def __init__(self, session: AsyncSession):
        super().__init__(UserPreferences, session)

    async def get_by_user_id(self, user_id: int) -> Optional[UserPreferences]:
        """Get the stored snapshot for a user."""
        return await self.get_by_id(user_id)

    async def upsert(
        self,
        user_id: int,
        data: UserPreferencesUpsert
    ) -> UserPreferences:
        """Insert the snapshot or replace every field of the existing one."""
        existing = await self.get_by_user_id(user_id)
        complexity = getattr(data.preferred_complexity, "value", data.preferred_complexity)

        if existing:
            existing.preferred_categories = list(data.preferred_categories)
            existing.preferred_complexity = complexity
            existing.preferred_tags = list(data.preferred_tags)
            existing.last_active_timestamp = utc_now()
            snapshot = existing
        else:
            snapshot = UserPreferences(
                user_id=user_id,
                preferred_categories=list(data.preferred_categories),
                preferred_complexity=complexity,
                preferred_tags=list(data.preferred_tags),
                last_active_timestamp=utc_now(),
            )

        try:
            self._session.add(snapshot)
            await self._session.flush()
            await self._session.refresh(snapshot)
        except SQLAlchemyError as e:
            raise DatabaseError(
                "Failed to store preference snapshot",
                operation="upsert",
                table=self.table_name,
                original_error=e,
            ) from e
        return snapshot
