"""
User Preferences Model

Derived per-user snapshot of template preferences. One row per user,
replaced wholesale on every recompute.
"""

from datetime import datetime
from enum import Enum
from typing import List

from sqlalchemy import Column, DateTime
from sqlmodel import Field, SQLModel

from suggestion_engine.infrastructure.db.models.base import JSONVariant, utc_now


class Complexity(str, Enum):
    """Template complexity tiers."""
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


class UserPreferences(SQLModel, table=True):
    """Preference snapshot for one user."""

    __tablename__ = "website_builder_user_preferences"

    user_id: int = Field(
        ...,
        primary_key=True,
        sa_column_kwargs={"autoincrement": False},
    )

    preferred_categories: List[str] = Field(
        default_factory=list,
        sa_column=Column(JSONVariant, nullable=False, default=list),
        description="Up to 5 categories, most preferred first"
    )

    preferred_complexity: str = Field(
        default=Complexity.BEGINNER.value,
        max_length=20,
    )

    preferred_tags: List[str] = Field(
        default_factory=list,
        sa_column=Column(JSONVariant, nullable=False, default=list),
        description="Up to 10 tags, most preferred first"
    )

    last_active_timestamp: datetime = Field(
        default_factory=utc_now,
        sa_column=Column(DateTime(timezone=True), nullable=False),
    )

    def to_dict(self) -> dict:
        """Convert to API response format."""
        return {
            "userId": self.user_id,
            "preferredCategories": list(self.preferred_categories or []),
            "preferredComplexity": self.preferred_complexity,
            "preferredTags": list(self.preferred_tags or []),
            "lastActiveTimestamp": self.last_active_timestamp.isoformat(),
        }


class UserPreferencesUpsert(SQLModel):
    """Schema for replacing a user's snapshot."""
    preferred_categories: List[str] = []
    preferred_complexity: Complexity = Complexity.BEGINNER
    preferred_tags: List[str] = []
