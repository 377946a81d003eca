"""Dependency providers for the sample application using FastAPI's Depends mechanism."""

from functools import lru_cache
from typing import Generator

from sqlalchemy.orm import Session

from src.txguard.config import DBSettings, TxGuardSettings
from src.txguard.db.database import create_db_session


@lru_cache()
def get_db_settings() -> DBSettings:
    """Get the database settings singleton."""
    return DBSettings()


@lru_cache()
def get_txguard_settings() -> TxGuardSettings:
    """Get the harness settings singleton."""
    return TxGuardSettings()


def get_db_session() -> Generator[Session, None, None]:
    """
    FastAPI dependency that provides a database session and ensures it's closed.

    Tests override this dependency with their rolled-back session.
    """
    session = create_db_session()
    try:
        yield session
    finally:
        session.close()
