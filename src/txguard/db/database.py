import logging
import threading
from typing import List, Optional

from sqlalchemy import Connection, Engine, create_engine, event, inspect, text
from sqlalchemy.exc import DBAPIError
from sqlalchemy.orm import declarative_base, sessionmaker

from src.txguard.config import DBSettings
from src.txguard.errors import DatabaseConnectionError

logger = logging.getLogger(__name__)

# --- Declarative Base for Models ---

Base = declarative_base()


def _enable_sqlite_transactions(engine: Engine) -> None:
    """
    Let SQLAlchemy, not pysqlite, decide when transactions begin.

    pysqlite only emits BEGIN before DML and treats SAVEPOINT as a statement
    outside any transaction, so a released savepoint would commit. Turning off
    the driver's own transaction handling and emitting BEGIN ourselves makes
    the outer test transaction and nested savepoints behave as on PostgreSQL.
    """

    @event.listens_for(engine, "connect")
    def _disable_pysqlite_begin(dbapi_connection, connection_record):
        dbapi_connection.isolation_level = None

    @event.listens_for(engine, "begin")
    def _emit_begin(conn):
        conn.exec_driver_sql("BEGIN")


def build_engine(settings: DBSettings, echo: bool = False, url: Optional[str] = None) -> Engine:
    """
    Create an engine for the configured database.

    Args:
        settings: Connection parameters
        echo: Log every emitted statement
        url: Optional URL overriding settings.database_url

    Returns:
        A SQLAlchemy Engine (no connection is opened yet)
    """
    db_url = url or settings.database_url

    if db_url.startswith("sqlite"):
        # SQLite requires check_same_thread: False when FastAPI runs sync
        # endpoints in a worker thread against the shared connection
        engine = create_engine(
            db_url, echo=echo, connect_args={"check_same_thread": False}
        )
        _enable_sqlite_transactions(engine)
    else:
        engine = create_engine(db_url, echo=echo, pool_pre_ping=True)

    logger.info(
        "Created engine for %s", engine.url.render_as_string(hide_password=True)
    )
    return engine


def connect(engine: Engine) -> Connection:
    """
    Open the single connection shared by every test.

    The connection is verified with ``SELECT 1`` and returned with no
    transaction open.

    Raises:
        DatabaseConnectionError: If the database is unreachable or the
            credentials are rejected. No retry is attempted.
    """
    safe_url = engine.url.render_as_string(hide_password=True)
    try:
        connection = engine.connect()
    except DBAPIError as exc:
        logger.error("Could not connect to %s: %s", safe_url, exc.orig)
        raise DatabaseConnectionError(
            f"Could not connect to the database: {exc.orig}", url=safe_url
        ) from exc

    try:
        connection.execute(text("SELECT 1"))
        connection.rollback()
    except DBAPIError as exc:
        connection.close()
        logger.error("Connection check failed for %s: %s", safe_url, exc.orig)
        raise DatabaseConnectionError(
            f"Database connection check failed: {exc.orig}", url=safe_url
        ) from exc

    logger.info("Connected to %s", safe_url)
    return connection


def create_schema(connection: Connection) -> List[str]:
    """
    Create the model tables missing on the connection and commit.

    Tables that already exist, and their rows, are left alone.

    Returns:
        Names of the tables this call created
    """
    # Import models so their tables are registered on Base.metadata
    from src.txguard.db import models  # noqa: F401

    inspector = inspect(connection)
    missing = [
        table
        for table in Base.metadata.sorted_tables
        if not inspector.has_table(table.name)
    ]
    if missing:
        Base.metadata.create_all(bind=connection, tables=missing)
    connection.commit()
    logger.info("Created %d tables", len(missing))
    return [table.name for table in missing]


def drop_schema(connection: Connection, table_names: Optional[List[str]] = None) -> None:
    """Drop the named model tables (all of them by default) and commit."""
    if connection.get_transaction() is not None:
        connection.rollback()
    tables = [
        table
        for table in Base.metadata.sorted_tables
        if table_names is None or table.name in table_names
    ]
    Base.metadata.drop_all(bind=connection, tables=tables)
    connection.commit()
    logger.info("Dropped %d tables", len(tables))


# --- Lazy Initialization for the Application Session Factory ---

_engine = None
_SessionLocal = None
_lock = threading.Lock()


def _initialize_factory():
    """
    Lazy initializer for the application's engine and session factory.
    This prevents settings from being loaded at import time and is thread-safe.
    """
    from src.txguard.dependencies import get_db_settings, get_txguard_settings

    global _engine, _SessionLocal
    with _lock:
        if _engine is None:
            _engine = build_engine(
                get_db_settings(), echo=get_txguard_settings().echo_sql
            )
            _SessionLocal = sessionmaker(
                autocommit=False, autoflush=False, bind=_engine
            )


def create_db_session():
    """
    Creates a new SQLAlchemy session for the application.
    Tests never reach this: they override the session dependency instead.
    """
    _initialize_factory()
    return _SessionLocal()


def get_engine():
    _initialize_factory()
    return _engine
