"""Transactional test isolation: one shared connection, one rolled-back transaction per test."""

from .errors import DatabaseConnectionError, TransactionStateError, TxGuardError
from .isolation import TransactionGuard, run_isolated

__all__ = [
    "DatabaseConnectionError",
    "TransactionGuard",
    "TransactionStateError",
    "TxGuardError",
    "run_isolated",
]
