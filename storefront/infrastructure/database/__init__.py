"""Database engine, sessions and settings."""

from .config import (
    DatabaseSettings,
    close_database,
    create_engine,
    get_engine,
    get_session,
    get_session_factory,
    init_database,
)

__all__ = [
    "close_database",
    "create_engine",
    "DatabaseSettings",
    "get_engine",
    "get_session",
    "get_session_factory",
    "init_database",
]
