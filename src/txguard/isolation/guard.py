"""Wrap one test in a transaction that is always rolled back."""

import logging
from typing import Any, Callable, Optional

from sqlalchemy import event
from sqlalchemy.engine import Connection, RootTransaction
from sqlalchemy.orm import Session

from src.txguard.errors import TransactionStateError

logger = logging.getLogger(__name__)


def _refuse_commit(conn: Connection) -> None:
    raise TransactionStateError(
        "The test transaction cannot be committed; use a session commit, "
        "which is turned into a savepoint."
    )


class TransactionGuard:
    """
    Context manager owning the transaction of exactly one test.

    Entering begins a transaction on the shared connection and hands out a
    session joined to it through savepoints, so ``session.commit()`` in code
    under test never reaches the database. ``commit()`` called on the
    connection itself is refused with ``TransactionStateError``. Leaving
    closes the session and rolls back whatever transaction the connection
    holds, on every exit path; an exception raised by the test is never
    suppressed.
    """

    def __init__(self, connection: Connection):
        self._connection = connection
        self._transaction: Optional[RootTransaction] = None
        self._session: Optional[Session] = None

    @property
    def active(self) -> bool:
        return self._transaction is not None

    @property
    def connection(self) -> Connection:
        if not self.active:
            raise TransactionStateError("The transaction guard is not active.")
        return self._connection

    @property
    def session(self) -> Session:
        if self._session is None:
            raise TransactionStateError("The transaction guard is not active.")
        return self._session

    def __enter__(self) -> Session:
        if self.active:
            raise TransactionStateError("The transaction guard is already active.")
        if self._connection.get_transaction() is not None:
            raise TransactionStateError(
                "The shared connection already has an open transaction; "
                "a previous test transaction was not rolled back."
            )

        self._transaction = self._connection.begin()
        event.listen(self._connection, "commit", _refuse_commit)
        self._session = Session(
            bind=self._connection,
            autoflush=False,
            join_transaction_mode="create_savepoint",
        )
        logger.debug("Began test transaction")
        return self._session

    def __exit__(self, exc_type, exc, tb) -> bool:
        try:
            self._session.close()
        finally:
            try:
                self._rollback_connection()
                logger.debug(
                    "Rolled back test transaction%s",
                    f" after {exc_type.__name__}" if exc_type else "",
                )
            finally:
                event.remove(self._connection, "commit", _refuse_commit)
                self._transaction = None
                self._session = None
        return False

    def _rollback_connection(self) -> None:
        # The test may have ended our transaction and auto-begun another one,
        # so roll back whatever the connection currently holds.
        current = self._connection.get_transaction()
        if current is None:
            return
        # A refused commit leaves the transaction inactive while the driver
        # still has it open; SQLAlchemy then skips the DBAPI rollback.
        driver_pending = not current.is_active
        current.rollback()
        if driver_pending:
            self._connection.connection.dbapi_connection.rollback()


def run_isolated(
    connection: Connection,
    procedure: Callable[..., Any],
    pass_session: bool = False,
) -> Any:
    """
    Run ``procedure`` inside a transaction that is rolled back afterwards.

    Args:
        connection: The shared connection
        procedure: Zero-argument test procedure, or one taking the session
            when ``pass_session`` is set
        pass_session: Call ``procedure(session)`` instead of ``procedure()``

    Returns:
        Whatever the procedure returns

    Raises:
        Whatever the procedure raises, unchanged, after the rollback.
    """
    with TransactionGuard(connection) as session:
        if pass_session:
            return procedure(session)
        return procedure()
