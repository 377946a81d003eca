"""Unit test specific fixtures."""

from typing import Generator

import pytest
from sqlalchemy import Connection

from src.txguard.config import DBSettings
from src.txguard.db import build_engine, connect, create_schema


@pytest.fixture
def memory_connection() -> Generator[Connection, None, None]:
    """A private in-memory SQLite connection with the schema created."""
    engine = build_engine(DBSettings(), url="sqlite://")
    connection = connect(engine)
    create_schema(connection)
    try:
        yield connection
    finally:
        connection.close()
        engine.dispose()
