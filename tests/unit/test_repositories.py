"""
Unit tests for the behavior and preference repositories.

Uses a mocked AsyncSession; queries are checked through their compiled SQL.
"""

import pytest
from unittest.mock import MagicMock

from sqlalchemy.exc import OperationalError

from suggestion_engine.infrastructure.db.models.user_behavior import (
    UserBehavior,
    UserBehaviorCreate,
)
from suggestion_engine.infrastructure.db.models.user_preferences import (
    Complexity,
    UserPreferences,
    UserPreferencesUpsert,
)
from suggestion_engine.infrastructure.db.repositories import (
    UserBehaviorRepository,
    UserPreferencesRepository,
)
from suggestion_engine.infrastructure.exceptions import DatabaseError


# ============== Test Fixtures ==============

@pytest.fixture
def behavior_repo(mock_session):
    return UserBehaviorRepository(mock_session)


@pytest.fixture
def preferences_repo(mock_session):
    return UserPreferencesRepository(mock_session)


def scalars_result(rows):
    result = MagicMock()
    result.scalars.return_value.all.return_value = rows
    return result


def executed_sql(mock_session) -> str:
    stmt = mock_session.execute.call_args[0][0]
    return str(stmt)


# ============== UserBehaviorRepository ==============

class TestUserBehaviorRepository:

    @pytest.mark.asyncio
    async def test_create_adds_and_flushes(self, behavior_repo, mock_session):
        data = UserBehaviorCreate(
            user_id=7,
            action="implement",
            item_type="template",
            item_id="hero-section",
            item_details={"category": "layout"},
        )

        record = await behavior_repo.create(data)

        assert isinstance(record, UserBehavior)
        assert record.action == "implement"
        assert record.item_details == {"category": "layout"}
        mock_session.add.assert_called_once_with(record)
        mock_session.flush.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_create_wraps_storage_errors(self, behavior_repo, mock_session):
        mock_session.flush.side_effect = OperationalError("INSERT", {}, Exception("down"))
        data = UserBehaviorCreate(user_id=7, action="view", item_type="template", item_id="x")

        with pytest.raises(DatabaseError) as exc_info:
            await behavior_repo.create(data)

        assert exc_info.value.details == {
            "operation": "create",
            "table": "website_builder_user_behavior",
        }

    @pytest.mark.asyncio
    async def test_recent_records_newest_first(self, behavior_repo, mock_session):
        rows = [MagicMock(), MagicMock()]
        mock_session.execute.return_value = scalars_result(rows)

        result = await behavior_repo.get_recent_by_user(7, limit=50)

        assert result == rows
        sql = executed_sql(mock_session)
        assert "WHERE website_builder_user_behavior.user_id = :user_id_1" in sql
        assert "ORDER BY website_builder_user_behavior." in sql
        assert "DESC, website_builder_user_behavior.id DESC" in sql
        assert "LIMIT :param_1" in sql

    @pytest.mark.asyncio
    async def test_recent_template_ids_only_views_and_implements(self, behavior_repo, mock_session):
        mock_session.execute.return_value = scalars_result(["hero-section", "login-form"])

        result = await behavior_repo.get_recent_template_ids(7, limit=20)

        assert result == ["hero-section", "login-form"]
        sql = executed_sql(mock_session)
        assert sql.startswith("SELECT website_builder_user_behavior.item_id")
        assert "website_builder_user_behavior.item_type = :item_type_1" in sql
        assert "website_builder_user_behavior.action IN" in sql

    @pytest.mark.asyncio
    async def test_query_errors_wrapped(self, behavior_repo, mock_session):
        mock_session.execute.side_effect = OperationalError("SELECT", {}, Exception("down"))

        with pytest.raises(DatabaseError):
            await behavior_repo.get_recent_by_user(7)


# ============== UserPreferencesRepository ==============

class TestUserPreferencesRepository:

    @pytest.mark.asyncio
    async def test_get_by_user_id(self, preferences_repo, mock_session):
        snapshot = UserPreferences(user_id=7)
        mock_session.get.return_value = snapshot

        assert await preferences_repo.get_by_user_id(7) is snapshot
        mock_session.get.assert_awaited_once_with(UserPreferences, 7)

    @pytest.mark.asyncio
    async def test_upsert_creates_missing_snapshot(self, preferences_repo, mock_session):
        data = UserPreferencesUpsert(
            preferred_categories=["dashboard"],
            preferred_complexity="advanced",
            preferred_tags=["charts"],
        )

        snapshot = await preferences_repo.upsert(7, data)

        assert snapshot.user_id == 7
        assert snapshot.preferred_categories == ["dashboard"]
        assert snapshot.preferred_complexity == "advanced"
        assert snapshot.preferred_tags == ["charts"]
        mock_session.add.assert_called_once_with(snapshot)
        mock_session.flush.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_upsert_replaces_every_field(self, preferences_repo, mock_session):
        existing = UserPreferences(
            user_id=7,
            preferred_categories=["forms", "blog"],
            preferred_complexity="beginner",
            preferred_tags=["form"],
        )
        previous_timestamp = existing.last_active_timestamp
        mock_session.get.return_value = existing

        snapshot = await preferences_repo.upsert(
            7,
            UserPreferencesUpsert(preferred_complexity=Complexity.INTERMEDIATE),
        )

        assert snapshot is existing
        assert snapshot.preferred_categories == []
        assert snapshot.preferred_tags == []
        assert snapshot.preferred_complexity == "intermediate"
        assert snapshot.last_active_timestamp >= previous_timestamp

    def test_snapshot_serialization(self):
        snapshot = UserPreferences(
            user_id=7,
            preferred_categories=["dashboard"],
            preferred_complexity="advanced",
            preferred_tags=["charts"],
        )

        data = snapshot.to_dict()

        assert data["userId"] == 7
        assert data["preferredCategories"] == ["dashboard"]
        assert data["preferredComplexity"] == "advanced"
        assert data["preferredTags"] == ["charts"]
        assert data["lastActiveTimestamp"].endswith("+00:00")
