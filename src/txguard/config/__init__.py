"""Configuration module for the txguard project."""

from .db_settings import DBSettings
from .txguard_settings import TxGuardSettings

__all__ = ["DBSettings", "TxGuardSettings"]
