"""
Shared column helpers for SQLModel tables.

JSON columns use JSONB on PostgreSQL and plain JSON elsewhere.
"""

from datetime import datetime, timezone

from sqlalchemy import JSON
from sqlalchemy.dialects.postgresql import JSONB


JSONVariant = JSON().with_variant(JSONB(), "postgresql")


def utc_now() -> datetime:
    """Timezone-aware current time used for every server-assigned timestamp."""
    return datetime.now(timezone.utc)
