"""Fixtures for running inner pytest sessions against the plugin."""

import pytest

from src.txguard import dependencies

PLUGIN_CONFTEST = 'pytest_plugins = ["src.txguard.testing.pytest_plugin"]\n'


@pytest.fixture
def inner_db_path(tmp_path):
    return tmp_path / "inner.sqlite3"


@pytest.fixture(autouse=True)
def set_inner_env(monkeypatch, pytester, inner_db_path):
    """Point inner sessions at their own SQLite file and load the plugin.

    The settings providers are cached, so they are cleared around each test
    for the inner session to read the patched environment.
    """
    monkeypatch.setenv("USE_SQLITE", "true")
    monkeypatch.setenv("SQLITE_PATH", str(inner_db_path))
    monkeypatch.delenv("DATABASE_URL", raising=False)
    monkeypatch.delenv("TXGUARD_CONNECTION_FAILURE_EXIT_CODE", raising=False)
    monkeypatch.delenv("TXGUARD_CREATE_SCHEMA", raising=False)
    pytester.makeconftest(PLUGIN_CONFTEST)
    dependencies.get_db_settings.cache_clear()
    dependencies.get_txguard_settings.cache_clear()
    yield
    dependencies.get_db_settings.cache_clear()
    dependencies.get_txguard_settings.cache_clear()
