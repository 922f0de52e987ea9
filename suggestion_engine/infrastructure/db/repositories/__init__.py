"""
Repository Layer for the Template Suggestion Engine

Exports all repository classes for dependency injection.
"""

from suggestion_engine.infrastructure.db.repositories.base_repository import (
    BaseRepository,
)
from suggestion_engine.infrastructure.db.repositories.user_behavior_repository import (
    UserBehaviorRepository,
)
from suggestion_engine.infrastructure.db.repositories.user_preferences_repository import (
    UserPreferencesRepository,
)


__all__ = [
    # Base
    "BaseRepository",
    # Repositories
    "UserBehaviorRepository",
    "UserPreferencesRepository",
]
