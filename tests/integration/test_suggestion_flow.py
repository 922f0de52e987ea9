"""
Integration tests for the record -> aggregate -> suggest flow.

Runs the real repositories and services against a temporary SQLite
database (aiosqlite) created through DatabaseManager.
"""

import pytest

# Register tables with SQLModel.metadata
from suggestion_engine.infrastructure.db.models import UserBehavior, UserPreferences  # noqa: F401
from suggestion_engine.infrastructure.db.database import DatabaseManager
from suggestion_engine.infrastructure.db.repositories import UserBehaviorRepository
from suggestion_engine.infrastructure.services.behavior_recorder import BehaviorRecorder
from suggestion_engine.infrastructure.services.preference_service import PreferenceService
from suggestion_engine.infrastructure.services.suggestion_service import SuggestionService


USER_ID = 7


@pytest.fixture
async def db_manager(tmp_path):
    manager = DatabaseManager(f"sqlite+aiosqlite:///{tmp_path / 'suggestions.db'}")
    await manager.create_tables()
    yield manager
    await manager.close()


@pytest.fixture
async def session(db_manager):
    async with db_manager.session_factory() as session:
        yield session


async def record_history(session):
    """Oldest first, so the implement is the newest record."""
    recorder = BehaviorRecorder(session)
    history = [
        ("search", "file", "dashboard", {"query": "dashboard", "category": "data", "tags": ["table"]}),
        ("view", "template", "profile-card", {"category": "forms", "complexity": "beginner", "tags": ["form"]}),
        ("favorite", "template", "stats-dashboard",
         {"category": "dashboard", "complexity": "advanced", "tags": ["charts"]}),
        ("implement", "template", "real-time-dashboard",
         {"category": "dashboard", "complexity": "advanced", "tags": ["charts", "realtime"]}),
    ]
    for action, item_type, item_id, details in history:
        assert await recorder.record_action(USER_ID, action, item_type, item_id, details) is True


@pytest.mark.asyncio
async def test_history_is_newest_first(session):
    await record_history(session)

    records = await BehaviorRecorder(session).get_history(USER_ID, limit=20)

    assert [r.item_id for r in records] == [
        "real-time-dashboard",
        "stats-dashboard",
        "profile-card",
        "dashboard",
    ]
    assert records[0].item_details["tags"] == ["charts", "realtime"]


@pytest.mark.asyncio
async def test_exclusion_ids_only_cover_views_and_implements(session):
    await record_history(session)

    excluded = await UserBehaviorRepository(session).get_recent_template_ids(USER_ID)

    assert excluded == ["real-time-dashboard", "profile-card"]


@pytest.mark.asyncio
async def test_recompute_stores_snapshot(session):
    await record_history(session)
    service = PreferenceService(session)

    snapshot = await service.recompute_preferences(USER_ID)

    assert snapshot.preferred_categories == ["dashboard", "data", "forms"]
    assert snapshot.preferred_complexity == "advanced"
    assert snapshot.preferred_tags == ["charts", "realtime", "table", "form"]

    stored = await service.get_preferences(USER_ID)
    assert stored.preferred_complexity == "advanced"


@pytest.mark.asyncio
async def test_recompute_replaces_previous_snapshot(session):
    await record_history(session)
    service = PreferenceService(session)
    await service.recompute_preferences(USER_ID)

    recorder = BehaviorRecorder(session)
    for _ in range(3):
        await recorder.record_action(
            USER_ID, "implement", "template", "contact-form",
            {"category": "forms", "complexity": "beginner"},
        )
    snapshot = await service.recompute_preferences(USER_ID)

    assert snapshot.preferred_categories[0] == "forms"
    assert snapshot.preferred_complexity == "beginner"


@pytest.mark.asyncio
async def test_user_without_history_gets_defaults(session):
    suggestions = await SuggestionService(session).get_suggestions(USER_ID, limit=5)

    assert [s.template_id for s in suggestions] == [
        "simple-card-component",
        "basic-form",
        "profile-card",
        "notification-banner",
        "button-set",
    ]
    assert await PreferenceService(session).get_preferences(USER_ID) is None


@pytest.mark.asyncio
async def test_suggestions_skip_recent_templates(session):
    await record_history(session)

    suggestions = await SuggestionService(session).get_suggestions(
        USER_ID, limit=3, include_complexity=True
    )

    # real-time-dashboard was just implemented
    assert [s.template_id for s in suggestions] == [
        "authentication-system",
        "e-commerce-product-page",
        "image-editor",
    ]
    assert await PreferenceService(session).get_preferences(USER_ID) is not None


@pytest.mark.asyncio
async def test_recompute_is_idempotent(session):
    await record_history(session)
    service = PreferenceService(session)

    first = await service.recompute_preferences(USER_ID)
    first_fields = (first.preferred_categories, first.preferred_complexity, first.preferred_tags)
    second = await service.recompute_preferences(USER_ID)

    assert (second.preferred_categories, second.preferred_complexity, second.preferred_tags) == first_fields
