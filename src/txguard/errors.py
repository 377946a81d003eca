"""Exceptions raised by the txguard harness."""

from typing import Optional


class TxGuardError(Exception):
    """Base class for harness errors."""


class DatabaseConnectionError(TxGuardError, ConnectionError):
    """The target database could not be reached or rejected the credentials.

    Raised once, while the shared connection is being opened. There is no
    retry: the test run is aborted.
    """

    def __init__(self, message: str, url: Optional[str] = None):
        super().__init__(message)
        self.url = url

    def __str__(self) -> str:
        base = super().__str__()
        if self.url:
            return f"{base} (url={self.url})"
        return base


class TransactionStateError(TxGuardError):
    """A test transaction could not begin because one is already open."""
