"""
SQLModel ORM Models for the Template Suggestion Engine

Exports all database models for Alembic autogenerate and application use.
Import models here to register them with SQLModel.metadata.
"""

from suggestion_engine.infrastructure.db.models.base import (
    JSONVariant,
    utc_now,
)
from suggestion_engine.infrastructure.db.models.user_behavior import (
    BehaviorAction,
    BehaviorItemType,
    UserBehavior,
    UserBehaviorCreate,
)
from suggestion_engine.infrastructure.db.models.user_preferences import (
    Complexity,
    UserPreferences,
    UserPreferencesUpsert,
)


__all__ = [
    # Base
    "JSONVariant",
    "utc_now",
    # Behavior
    "BehaviorAction",
    "BehaviorItemType",
    "UserBehavior",
    "UserBehaviorCreate",
    # Preferences
    "Complexity",
    "UserPreferences",
    "UserPreferencesUpsert",
]
