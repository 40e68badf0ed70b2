"""
Alembic migration environment — reads the database URL from app settings.

Uses a SYNC engine for migrations (psycopg2) even though the app
uses async (asyncpg) at runtime.
"""

from logging.config import fileConfig

from alembic import context
from sqlalchemy import create_engine, pool

from business_api.core.config import settings
from business_api.db.models import Base  # noqa: F401 (imports all models via __init__.py)

# Alembic Config object
config = context.config

sync_url = settings.DATABASE_URL_SYNC
config.set_main_option("sqlalchemy.url", sync_url)

# Interpret the config file for Python logging.
if config.config_file_name is not None:
    fileConfig(config.config_file_name)

target_metadata = Base.metadata


def run_migrations_offline() -> None:
    """Run migrations in 'offline' mode."""
    url = config.get_main_option("sqlalchemy.url")
    context.configure(
        url=url,
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )
    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    """Run migrations in 'online' mode with sync engine."""
    connectable = create_engine(
        sync_url,
        poolclass=pool.NullPool,
    )
    with connectable.connect() as connection:
        context.configure(connection=connection, target_metadata=target_metadata)
        with context.begin_transaction():
            context.run_migrations()
    connectable.dispose()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
