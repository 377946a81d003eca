"""Database-specific settings for the txguard project."""

from typing import Optional

from pydantic import Field, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict


class DBSettings(BaseSettings):
    """Database configuration settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    db_user: str = Field(
        default="user",
        title="Database User",
        description="Username for the database connection.",
        alias="DB_USER",
    )
    db_password: str = Field(
        default="password",
        title="Database Password",
        description="Password for the database connection.",
        alias="DB_PASSWORD",
    )
    db_host: str = Field(
        default="localhost",
        title="Database Host",
        description="Hostname for the database server.",
        alias="DB_HOST",
    )
    db_port: int = Field(
        default=5432,
        title="Database Port",
        description="Port number for the database server.",
        alias="DB_PORT",
    )
    db_name: str = Field(
        default="txguard_test",
        title="Database Name",
        description="Name of the database to connect to.",
        alias="DB_NAME",
    )

    # --- Backend Selection ---
    use_sqlite: bool = Field(
        default=True,
        title="Use SQLite",
        description="Toggle between SQLite (True) and PostgreSQL (False) databases.",
        alias="USE_SQLITE",
    )
    sqlite_path: str = Field(
        default="test_db.sqlite3",
        title="SQLite Path",
        description="Database file used when USE_SQLITE is enabled.",
        alias="SQLITE_PATH",
    )
    explicit_url: Optional[str] = Field(
        default=None,
        title="Database URL",
        description="Full SQLAlchemy URL; overrides every other connection field.",
        alias="DATABASE_URL",
    )

    @computed_field
    @property
    def database_url(self) -> str:
        """Assemble the database URL from individual components."""
        if self.explicit_url:
            return self.explicit_url
        if self.use_sqlite:
            return f"sqlite:///{self.sqlite_path}"
        return f"postgresql+psycopg://{self.db_user}:{self.db_password}@{self.db_host}:{self.db_port}/{self.db_name}"
