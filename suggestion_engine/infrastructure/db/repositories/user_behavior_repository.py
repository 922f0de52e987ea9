"""
User Behavior Repository

Extends BaseRepository with the history queries the suggestion engine needs.
"""

from typing import List

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from suggestion_engine.infrastructure.db.repositories.base_repository import BaseRepository
from suggestion_engine.infrastructure.db.models.user_behavior import (
    BehaviorAction,
    BehaviorItemType,
    UserBehavior,
    UserBehaviorCreate,
)


# Actions whose template ids must not be suggested again right away
EXCLUDING_ACTIONS = (BehaviorAction.VIEW.value, BehaviorAction.IMPLEMENT.value)


class UserBehaviorRepository(BaseRepository[UserBehavior, UserBehaviorCreate]):
    """Repository for the append-only behavior log."""

    def __init__(self, session: AsyncSession):
        super().__init__(UserBehavior, session)

    async def get_recent_by_user(
        self,
        user_id: int,
        limit: int = 50
    ) -> List[UserBehavior]:
        """Get a user's most recent records, newest first."""
        stmt = (
            select(UserBehavior)
            .where(UserBehavior.user_id == user_id)
            .order_by(UserBehavior.timestamp.desc(), UserBehavior.id.desc())
            .limit(limit)
        )
        return await self._fetch_all(stmt, operation="get_recent_by_user")

    async def get_recent_template_ids(
        self,
        user_id: int,
        limit: int = 20
    ) -> List[str]:
        """Item ids of the user's latest template views and implementations."""
        stmt = (
            select(UserBehavior.item_id)
            .where(
                UserBehavior.user_id == user_id,
                UserBehavior.item_type == BehaviorItemType.TEMPLATE.value,
                UserBehavior.action.in_(EXCLUDING_ACTIONS),
            )
            .order_by(UserBehavior.timestamp.desc(), UserBehavior.id.desc())
            .limit(limit)
        )
        return await self._fetch_all(stmt, operation="get_recent_template_ids")
