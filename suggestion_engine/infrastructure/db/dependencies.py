"""
Dependency Injection Providers for the Template Suggestion Engine

Provides FastAPI dependencies for database sessions and the session-bound
services the website builder routes use.
"""

from typing import Annotated, AsyncGenerator

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from suggestion_engine.infrastructure.db.database import get_session
from suggestion_engine.infrastructure.services.behavior_recorder import BehaviorRecorder
from suggestion_engine.infrastructure.services.preference_service import PreferenceService
from suggestion_engine.infrastructure.services.suggestion_service import SuggestionService


# Type alias for session dependency
SessionDep = Annotated[AsyncSession, Depends(get_session)]


async def get_behavior_recorder(
    session: SessionDep,
) -> AsyncGenerator[BehaviorRecorder, None]:
    """
    Dependency provider for BehaviorRecorder.

    Usage:
        @router.post("/track")
        async def track(recorder: BehaviorRecorderDep):
            ...
    """
    yield BehaviorRecorder(session)


async def get_preference_service(
    session: SessionDep,
) -> AsyncGenerator[PreferenceService, None]:
    """
    Dependency provider for PreferenceService.
    """
    yield PreferenceService(session)


async def get_suggestion_service(
    session: SessionDep,
) -> AsyncGenerator[SuggestionService, None]:
    yield SuggestionService(session)


# Type aliases for service dependencies
BehaviorRecorderDep = Annotated[
    BehaviorRecorder,
    Depends(get_behavior_recorder)
]
PreferenceServiceDep = Annotated[
    PreferenceService,
    Depends(get_preference_service)
]
SuggestionServiceDep = Annotated[
    SuggestionService,
    Depends(get_suggestion_service)
]
