"""
Behavior Tracker

Fire-and-forget recording for the behavior capture middleware. Each tracked
action is written on its own task with its own session, after the response
has already been produced.
"""

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Any, AsyncContextManager, Callable, Dict, Set

from sqlalchemy.ext.asyncio import AsyncSession

from suggestion_engine.infrastructure.db.database import get_session_context
from suggestion_engine.infrastructure.services.behavior_recorder import BehaviorRecorder


logger = logging.getLogger(__name__)

SessionContextFactory = Callable[[], AsyncContextManager[AsyncSession]]


@dataclass(frozen=True)
class TrackedAction:
    """An action derived from an HTTP request, ready to be recorded."""
    action: str
    item_type: str
    item_id: str
    item_details: Dict[str, Any] = field(default_factory=dict)


class BehaviorTracker:
    """
    Schedules behavior records off the request path.

    Pending tasks are held here until they finish so they are not garbage
    collected mid-flight; ``drain()`` waits for them on shutdown.
    """

    def __init__(self, session_context: SessionContextFactory = get_session_context):
        self._session_context = session_context
        self._pending: Set[asyncio.Task] = set()

    @property
    def pending(self) -> int:
        return len(self._pending)

    def track(self, user_id: int, tracked: TrackedAction) -> asyncio.Task:
        """Record ``tracked`` for ``user_id`` in the background."""
        task = asyncio.create_task(self._record(user_id, tracked))
        self._pending.add(task)
        task.add_done_callback(self._on_done)
        return task

    async def drain(self) -> None:
        """Wait for every pending record to finish."""
        if self._pending:
            logger.info(f"[TRACKING] Draining {len(self._pending)} pending behavior record(s)")
            await asyncio.gather(*list(self._pending), return_exceptions=True)

    async def _record(self, user_id: int, tracked: TrackedAction) -> None:
        async with self._session_context() as session:
            recorded = await BehaviorRecorder(session).record_action(
                user_id=user_id,
                action=tracked.action,
                item_type=tracked.item_type,
                item_id=tracked.item_id,
                item_details=tracked.item_details,
            )
        if not recorded:
            logger.warning(
                f"[TRACKING] Dropped {tracked.action} {tracked.item_type}:{tracked.item_id} "
                f"for user {user_id}"
            )

    def _on_done(self, task: asyncio.Task) -> None:
        self._pending.discard(task)
        if task.cancelled():
            return
        error = task.exception()
        if error is not None:
            logger.error(f"[TRACKING] Background behavior recording failed: {error}")
