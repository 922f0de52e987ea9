"""
Suggestion Service

Loads a user's snapshot and recent activity and hands them to the
SuggestionComposer. Every failure degrades to the beginner defaults.
"""

import logging
from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from suggestion_engine.config.settings import settings
from suggestion_engine.domain.suggestions import (
    PreferenceProfile,
    SuggestionComposer,
    SuggestionOptions,
    TemplateSuggestion,
    build_catalog,
    fallback_suggestions,
)
from suggestion_engine.infrastructure.db.repositories.user_behavior_repository import (
    UserBehaviorRepository,
)
from suggestion_engine.infrastructure.db.repositories.user_preferences_repository import (
    UserPreferencesRepository,
)
from suggestion_engine.infrastructure.services.preference_service import PreferenceService


logger = logging.getLogger(__name__)


class SuggestionService:
    """Composes template suggestions for one user per call."""

    def __init__(
        self,
        session: AsyncSession,
        composer: Optional[SuggestionComposer] = None,
        exclusion_window: Optional[int] = None,
    ):
        self._behavior_repo = UserBehaviorRepository(session)
        self._preferences_repo = UserPreferencesRepository(session)
        self._preference_service = PreferenceService(session)
        self._composer = composer or SuggestionComposer(build_catalog(settings.template_catalog))
        self._exclusion_window = exclusion_window or settings.exclusion_window

    async def get_suggestions(
        self,
        user_id: int,
        limit: int = 5,
        include_complexity: bool = False,
        include_categories: bool = False,
        include_tags: bool = False,
    ) -> List[TemplateSuggestion]:
        """
        Ranked suggestions for a user.

        Never raises: any failure returns the beginner defaults truncated to
        ``limit``.
        """
        options = SuggestionOptions(
            limit=limit,
            include_complexity=include_complexity,
            include_categories=include_categories,
            include_tags=include_tags,
        )

        try:
            snapshot = await self._preferences_repo.get_by_user_id(user_id)
            if snapshot is None:
                snapshot = await self._preference_service.recompute_preferences(user_id)

            if snapshot is None:
                logger.debug(f"[SUGGESTIONS] No history for user {user_id}, serving defaults")
                return self._composer.compose(None, (), options)

            excluded_ids = await self._behavior_repo.get_recent_template_ids(
                user_id, limit=self._exclusion_window
            )
            suggestions = self._composer.compose(
                PreferenceProfile.from_snapshot(snapshot),
                excluded_ids,
                options,
            )
        except Exception as e:
            logger.error(f"[SUGGESTIONS] Falling back to defaults for user {user_id}: {e}")
            return fallback_suggestions(limit)

        logger.debug(f"[SUGGESTIONS] {len(suggestions)} suggestions for user {user_id}")
        return suggestions
