"""
Behavior Recorder

Appends website builder actions to the behavior log. Recording is advisory:
failures are logged and reported as ``False``, never raised, so tracking can
not break the request that triggered it.
"""

import logging
from typing import Any, Dict, List, Optional

from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.ext.asyncio import AsyncSession

from suggestion_engine.infrastructure.db.models.user_behavior import (
    UserBehavior,
    UserBehaviorCreate,
)
from suggestion_engine.infrastructure.db.repositories.user_behavior_repository import (
    UserBehaviorRepository,
)


logger = logging.getLogger(__name__)


class BehaviorRecorder:
    """Writes and reads a user's behavior log."""

    def __init__(self, session: AsyncSession):
        self._session = session
        self._behavior_repo = UserBehaviorRepository(session)

    async def record_action(
        self,
        user_id: int,
        action: str,
        item_type: str,
        item_id: str,
        item_details: Optional[Dict[str, Any]] = None,
    ) -> bool:
        """
        Append one immutable behavior record and commit it.

        Returns:
            True once the record is committed, False on invalid input or any
            storage failure
        """
        try:
            data = UserBehaviorCreate(
                user_id=user_id,
                action=action,
                item_type=item_type,
                item_id=item_id,
                item_details=item_details or {},
            )
        except PydanticValidationError as e:
            logger.warning(
                f"[BEHAVIOR] Rejected {action!r}/{item_type!r} for user {user_id}: "
                f"{e.error_count()} validation error(s)"
            )
            return False

        try:
            await self._behavior_repo.create(data)
            await self._session.commit()
        except Exception as e:
            logger.error(f"[BEHAVIOR] Failed to record {data.action} for user {user_id}: {e}")
            await self._rollback()
            return False

        logger.debug(f"[BEHAVIOR] Recorded {data.action} {data.item_type}:{data.item_id} for user {user_id}")
        return True

    async def get_history(self, user_id: int, limit: int = 20) -> List[UserBehavior]:
        """A user's most recent records, newest first."""
        return await self._behavior_repo.get_recent_by_user(user_id, limit=limit)

    async def _rollback(self) -> None:
        try:
            await self._session.rollback()
        except Exception as e:
            logger.error(f"[BEHAVIOR] Rollback failed: {e}")
