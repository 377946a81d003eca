"""Harness behaviour settings for the txguard project."""

from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class TxGuardSettings(BaseSettings):
    """The configurable fields for the test harness."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    echo_sql: bool = Field(
        default=False,
        title="Echo SQL",
        description="Log every statement emitted by the shared engine.",
        alias="TXGUARD_ECHO_SQL",
    )
    create_schema: bool = Field(
        default=True,
        title="Create Schema",
        description="Create model tables on SQLite at session start and drop them at the end.",
        alias="TXGUARD_CREATE_SCHEMA",
    )
    connection_failure_exit_code: int = Field(
        default=2,
        title="Connection Failure Exit Code",
        description="Exit status used when the shared connection cannot be opened.",
        alias="TXGUARD_CONNECTION_FAILURE_EXIT_CODE",
    )

    @field_validator("echo_sql", "create_schema", mode="before")
    @classmethod
    def parse_flag(cls, value: Any) -> bool:
        """Ensure flags are parsed as booleans from strings."""
        if isinstance(value, str):
            return value.lower() in {"true", "1", "yes", "on"}
        return bool(value)
