"""
Database Infrastructure Package for the Template Suggestion Engine

Exports database utilities. Route dependencies live in
``suggestion_engine.infrastructure.db.dependencies``.
"""

from suggestion_engine.infrastructure.db.database import (
    DatabaseManager,
    get_db_manager,
    get_session,
    get_session_context,
    init_db,
    close_db,
)


__all__ = [
    "DatabaseManager",
    "get_db_manager",
    "get_session",
    "get_session_context",
    "init_db",
    "close_db",
]
