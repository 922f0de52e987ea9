"""
Test configuration and fixtures for the Template Suggestion Engine.

Provides shared fixtures for unit and integration tests.
"""

import time
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import jwt
import pytest
from fastapi.testclient import TestClient


# =============================================================================
# App Fixtures
# =============================================================================

@pytest.fixture
def app():
    """Get the FastAPI application."""
    from suggestion_engine.main import app
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
def client(app):
    """Get synchronous test client."""
    return TestClient(app)


# =============================================================================
# Auth Fixtures
# =============================================================================

@pytest.fixture
def mock_user_id():
    return 42


def make_token(sub, secret=None, expires_in=3600, audience="authenticated", **claims):
    """Sign a bearer token the way the auth provider does."""
    from suggestion_engine.config.settings import settings

    payload = {"sub": sub, "exp": int(time.time()) + expires_in, **claims}
    if audience is not None:
        payload["aud"] = audience
    return jwt.encode(payload, secret or settings.jwt_secret, algorithm="HS256")


@pytest.fixture
def token_factory():
    return make_token


@pytest.fixture
def auth_headers(mock_user_id):
    """Authorization header for mock_user_id."""
    return {"Authorization": f"Bearer {make_token(str(mock_user_id))}"}


# =============================================================================
# Mock Fixtures
# =============================================================================

@pytest.fixture
def mock_session():
    """Mock async session for testing."""
    session = AsyncMock()
    session.execute = AsyncMock()
    session.get = AsyncMock(return_value=None)
    session.add = MagicMock()
    session.flush = AsyncMock()
    session.refresh = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    return session


# =============================================================================
# Sample Data Fixtures
# =============================================================================

def behavior(action, category=None, complexity=None, tags=None, **extra):
    """Lightweight behavior record for aggregation tests."""
    details = dict(extra)
    if category is not None:
        details["category"] = category
    if complexity is not None:
        details["complexity"] = complexity
    if tags is not None:
        details["tags"] = tags
    return SimpleNamespace(action=action, item_details=details)


@pytest.fixture
def make_behavior():
    return behavior


@pytest.fixture
def advanced_history():
    """Newest-first history of a user who builds advanced dashboards."""
    return [
        behavior("implement", category="dashboard", complexity="advanced", tags=["charts", "realtime"]),
        behavior("favorite", category="dashboard", complexity="advanced", tags=["charts"]),
        behavior("view", category="forms", complexity="beginner", tags=["form"]),
        behavior("search", category="data", tags=["table"]),
    ]


@pytest.fixture
def advanced_snapshot():
    """Stored snapshot matching advanced_history."""
    return SimpleNamespace(
        user_id=42,
        preferred_categories=["dashboard", "data", "forms"],
        preferred_complexity="advanced",
        preferred_tags=["charts", "realtime", "table", "form"],
    )
