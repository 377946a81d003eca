"""Shared test fixtures for all test categories."""

from typing import AsyncGenerator, Generator

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.orm import Session

from src.txguard import dependencies
from src.txguard.main import app

pytest_plugins = ["pytester", "src.txguard.testing.pytest_plugin"]


# =============================================================================
# API Fixtures (used by e2e/ tests)
# =============================================================================


@pytest.fixture
def api_db_session(db_session: Session) -> Generator[Session, None, None]:
    """Route the app's session dependency to the test's rolled-back session."""
    app.dependency_overrides[dependencies.get_db_session] = lambda: db_session
    try:
        yield db_session
    finally:
        app.dependency_overrides.pop(dependencies.get_db_session, None)


@pytest.fixture
async def client(api_db_session: Session) -> AsyncGenerator[AsyncClient, None]:
    """
    Creates httpx.AsyncClient configured for database-dependent tests.

    Depends on api_db_session to ensure the DI override is applied.
    """
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test"
    ) as c:
        yield c
