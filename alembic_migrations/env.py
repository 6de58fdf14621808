"""
Alembic environment.

Runs migrations synchronously through psycopg2. The URL comes from the
Alembic config when set by ``apply_db_migration``, otherwise from the TOML
file selected by ``ENVIRONMENT``.
"""
import os
from logging.config import fileConfig

from alembic import context
from sqlalchemy import engine_from_config, pool

from carbon_tracker.core.config import get_config
from carbon_tracker.database import Base
from carbon_tracker.database import schemas  # noqa: F401
from carbon_tracker.database.base import get_db_url

config = context.config

if config.config_file_name is not None:
    fileConfig(config.config_file_name, disable_existing_loggers=False)

target_metadata = Base.metadata


def get_url() -> str:
    url = config.get_main_option("sqlalchemy.url")
    if url:
        return url

    environment = os.environ.get("ENVIRONMENT", "development")
    db_url = get_db_url(get_config(f"{environment}.toml"))
    return db_url.set(drivername="postgresql+psycopg2").render_as_string(
        hide_password=False
    )


def run_migrations_offline() -> None:
    context.configure(
        url=get_url(),
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
        compare_type=True,
    )

    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    section = config.get_section(config.config_ini_section, {})
    section["sqlalchemy.url"] = get_url()
    connectable = engine_from_config(
        section, prefix="sqlalchemy.", poolclass=pool.NullPool
    )

    with connectable.connect() as connection:
        context.configure(
            connection=connection, target_metadata=target_metadata, compare_type=True
        )

        with context.begin_transaction():
            context.run_migrations()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
