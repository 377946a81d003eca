"""Database engine, connection and schema helpers."""

from .database import (
    Base,
    build_engine,
    connect,
    create_db_session,
    create_schema,
    drop_schema,
    get_engine,
)

__all__ = [
    "Base",
    "build_engine",
    "connect",
    "create_db_session",
    "create_schema",
    "drop_schema",
    "get_engine",
]
