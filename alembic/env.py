from sqlalchemy import create_engine, pool

from alembic import context
from src.txguard.config import DBSettings
from src.txguard.db import models  # noqa: F401
from src.txguard.db.database import Base

config = context.config

target_metadata = Base.metadata


def run_migrations_online() -> None:
    database_url = DBSettings().database_url

    connectable = create_engine(
        database_url,
        poolclass=pool.NullPool,
    )

    with connectable.connect() as connection:
        context.configure(connection=connection, target_metadata=target_metadata)

        with context.begin_transaction():
            context.run_migrations()


if context.is_offline_mode():
    pass  # Offline mode not implemented
else:
    run_migrations_online()
