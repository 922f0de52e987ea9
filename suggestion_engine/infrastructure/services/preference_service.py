"""
Preference Service

Recomputes and reads per-user preference snapshots.
"""

import logging
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from suggestion_engine.config.settings import settings
from suggestion_engine.domain.suggestions.preference_aggregator import aggregate_preferences
from suggestion_engine.infrastructure.db.models.user_preferences import (
    UserPreferences,
    UserPreferencesUpsert,
)
from suggestion_engine.infrastructure.db.repositories.user_behavior_repository import (
    UserBehaviorRepository,
)
from suggestion_engine.infrastructure.db.repositories.user_preferences_repository import (
    UserPreferencesRepository,
)


logger = logging.getLogger(__name__)


class PreferenceService:
    """
    Preference aggregator.

    A snapshot is always rebuilt from the latest behavior window and
    replaces the stored one; it is never patched.
    """

    def __init__(self, session: AsyncSession, history_window: Optional[int] = None):
        self._session = session
        self._behavior_repo = UserBehaviorRepository(session)
        self._preferences_repo = UserPreferencesRepository(session)
        self._history_window = history_window or settings.behavior_history_window

    async def recompute_preferences(self, user_id: int) -> Optional[UserPreferences]:
        """
        Rebuild the user's snapshot from their most recent behavior.

        Returns:
            The stored snapshot, or None when the user has no behavior or
            storage failed (nothing is written in either case)
        """
        try:
            records = await self._behavior_repo.get_recent_by_user(
                user_id, limit=self._history_window
            )
            if not records:
                logger.debug(f"[PREFERENCES] No behavior for user {user_id}, nothing to aggregate")
                return None

            profile = aggregate_preferences(records)
            snapshot = await self._preferences_repo.upsert(
                user_id,
                UserPreferencesUpsert(
                    preferred_categories=profile.preferred_categories,
                    preferred_complexity=profile.preferred_complexity,
                    preferred_tags=profile.preferred_tags,
                ),
            )
            await self._session.commit()
        except Exception as e:
            logger.error(f"[PREFERENCES] Recompute failed for user {user_id}: {e}")
            await self._rollback()
            return None

        logger.info(
            f"[PREFERENCES] Recomputed user {user_id} from {len(records)} records: "
            f"complexity={snapshot.preferred_complexity}, "
            f"categories={len(snapshot.preferred_categories)}, tags={len(snapshot.preferred_tags)}"
        )
        return snapshot

    async def get_preferences(self, user_id: int) -> Optional[UserPreferences]:
        """Stored snapshot, or None if absent or unreadable."""
        try:
            return await self._preferences_repo.get_by_user_id(user_id)
        except Exception as e:
            logger.error(f"[PREFERENCES] Failed to load snapshot for user {user_id}: {e}")
            return None

    async def _rollback(self) -> None:
        try:
            await self._session.rollback()
        except Exception as e:
            logger.error(f"[PREFERENCES] Rollback failed: {e}")
