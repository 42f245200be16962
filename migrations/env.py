from logging.config import fileConfig

from alembic import context
from sqlalchemy import create_engine

from playlist_api.core.db import get_database_url
from playlist_api.models import Base

config = context.config

if config.config_file_name is not None:
    fileConfig(config.config_file_name)

target_metadata = Base.metadata


def _require_database_url() -> str:
    database_url = get_database_url()
    if not database_url:
        raise RuntimeError("DATABASE_URL not configured")
    return database_url


def run_migrations_offline() -> None:
    context.configure(
        url=_require_database_url(),
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )
    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    connectable = create_engine(_require_database_url())
    with connectable.connect() as connection:
        context.configure(connection=connection, target_metadata=target_metadata)
        with context.begin_transaction():
            context.run_migrations()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
