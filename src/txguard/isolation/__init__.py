"""Per-test transaction guard."""

from .guard import TransactionGuard, run_isolated

__all__ = ["TransactionGuard", "run_isolated"]
