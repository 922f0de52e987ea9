"""
User Behavior Model

Append-only log of website builder actions (views, implementations,
searches, favorites) used to derive template preferences.
"""

from datetime import datetime
from enum import Enum
from typing import Optional

from sqlalchemy import Column, DateTime, String
from sqlmodel import Field, SQLModel

from suggestion_engine.infrastructure.db.models.base import JSONVariant, utc_now


class BehaviorAction(str, Enum):
    """Kinds of tracked user actions."""
    VIEW = "view"
    IMPLEMENT = "implement"
    SEARCH = "search"
    FAVORITE = "favorite"


class BehaviorItemType(str, Enum):
    """Kinds of items an action can target."""
    TEMPLATE = "template"
    FILE = "file"
    CATEGORY = "category"


class UserBehavior(SQLModel, table=True):
    """One immutable behavior record."""

    __tablename__ = "website_builder_user_behavior"

    id: Optional[int] = Field(default=None, primary_key=True)

    user_id: int = Field(
        ...,
        index=True,
        description="User who performed the action"
    )

    action: str = Field(
        ...,
        max_length=20,
        sa_column=Column(String(20), nullable=False),
        description="view, implement, search or favorite"
    )

    item_type: str = Field(
        ...,
        max_length=20,
        sa_column=Column(String(20), nullable=False),
        description="template, file or category"
    )

    item_id: str = Field(
        ...,
        max_length=255,
        sa_column=Column(String(255), nullable=False),
        description="Template id, file path, search query or category name"
    )

    item_details: Optional[dict] = Field(
        default=None,
        sa_column=Column(JSONVariant, default=dict),
        description="Open map: category, complexity, tags and anything else"
    )

    timestamp: datetime = Field(
        default_factory=utc_now,
        sa_column=Column(DateTime(timezone=True), nullable=False, index=True),
        description="When the action happened (server assigned)"
    )


class UserBehaviorCreate(SQLModel):
    """Schema for recording a behavior."""

    model_config = {"use_enum_values": True}

    user_id: int
    action: BehaviorAction
    item_type: BehaviorItemType
    item_id: str = Field(..., min_length=1, max_length=255)
    item_details: Optional[dict] = None
