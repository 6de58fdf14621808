"""
Database base configuration.

Builds the async database URL and engine options from config, creates the
PostgreSQL database when missing and applies Alembic migrations.
"""
import asyncio
import contextlib
import functools
import logging
from pathlib import Path
from typing import Any

from alembic import command
from alembic.config import Config as alembic_config
from sqlalchemy import text
from sqlalchemy.engine.url import URL
from sqlalchemy.exc import DBAPIError
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

from carbon_tracker.core.config import Config

DEFAULT_DRIVERNAME = "postgresql+asyncpg"

asyncpg_engine_kw = {
    "pool_pre_ping": True,
    # feature will normally emit SQL equivalent to "SELECT 1" each time a connection is checked out from the pool
    "pool_size": 2,  # number of connections to keep open at a time
    "max_overflow": 4,  # number of connections to allow to be opened above pool_size
    "connect_args": {
        "prepared_statement_cache_size": 0,  # disable prepared statement cache
        "statement_cache_size": 0,  # disable statement cache
    },
}


def _db_params(config: Config) -> tuple[str, dict[str, Any]]:
    params = dict(config.data["db"])
    drivername = params.pop("drivername", DEFAULT_DRIVERNAME)
    return drivername, params


def get_db_url(config: Config) -> URL:
    """
    Construct database URL from config.
    """
    drivername, params = _db_params(config)
    return URL.create(drivername=drivername, **params)


def get_engine_kw(db_url: URL) -> dict[str, Any]:
    """
    Engine options for the given URL.

    Pool and statement-cache settings only apply to asyncpg.
    """
    if db_url.get_backend_name() == "postgresql":
        return asyncpg_engine_kw
    return {}


def get_async_engine(async_db_url: URL) -> AsyncEngine:
    """
    Create async database engine with connection pooling.
    """
    if async_db_url.get_backend_name() != "postgresql":
        return create_async_engine(async_db_url)

    return create_async_engine(
        async_db_url,
        pool_recycle=3600,
        pool_pre_ping=True,
        pool_size=60,
        max_overflow=80,
        pool_timeout=30,
    )


async def create_database(config: Config) -> bool:
    """
    Ensures the PostgreSQL database specified in the config exists.

    Connects to the 'postgres' maintenance database to issue CREATE DATABASE.

    Args:
        config: The application configuration.

    Returns:
        True if the database was newly created by this function.
        False if the database already existed or the backend is not PostgreSQL.

    Raises:
        ValueError: If the database name is missing in the configuration.
    """
    drivername, params = _db_params(config)
    if not drivername.startswith("postgresql"):
        logging.info(f"Skipping database creation for driver {drivername}")
        return False

    logging.info("Creating database...")
    target_database_name = params.pop("database", None)

    if not target_database_name:
        logging.error("Database name not found in configuration for creation.")
        raise ValueError("Database name missing in configuration for creation.")

    if "user" in params and "username" not in params:
        params["username"] = params.pop("user")

    maintenance_url = URL.create(
        drivername=drivername, **{**params, "database": "postgres"}
    )
    maintenance_engine = None
    try:
        maintenance_engine = get_async_engine(maintenance_url)
        logging.info(
            f"Attempting to create database '{target_database_name}' in {params.get('host')} if it does not exist."
        )
        async with maintenance_engine.connect() as connection:
            # CREATE DATABASE cannot run inside a transaction block
            autocommit_connection = await connection.execution_options(
                isolation_level="AUTOCOMMIT"
            )
            await autocommit_connection.execute(
                text(f'CREATE DATABASE "{target_database_name}"')
            )
        logging.info(f"Database '{target_database_name}' created successfully.")
        return True
    except DBAPIError as e:
        # 42P04: duplicate_database
        with contextlib.suppress(AttributeError):
            if getattr(e.orig, "pgcode", None) == "42P04" or "already exists" in str(e.orig):
                logging.warning(
                    f"Database '{target_database_name}' already exists. No action taken."
                )
                return False

        logging.error(
            f"A DBAPIError occurred while trying to create database '{target_database_name}': {e}"
        )
        raise
    finally:
        if maintenance_engine:
            await maintenance_engine.dispose()


async def apply_db_migration(config: Config):
    """
    Create the database if needed and upgrade it to the latest Alembic revision.

    Migrations run in a worker thread so the event loop is not blocked, but
    the call only returns once they have completed.

    Args:
        config: The application configuration containing database connection details.
    """
    await create_database(config)

    alembic_cfg = alembic_config(str(Path.cwd() / "alembic.ini"))
    alembic_cfg.set_main_option(
        "script_location", str(Path.cwd() / "alembic_migrations")
    )

    # Alembic runs synchronously through psycopg2
    sync_url = get_db_url(config).set(drivername="postgresql+psycopg2")
    alembic_cfg.set_main_option(
        "sqlalchemy.url", sync_url.render_as_string(hide_password=False)
    )

    logging.info("Starting database migrations...")
    loop = asyncio.get_running_loop()
    await loop.run_in_executor(
        None, functools.partial(command.upgrade, alembic_cfg, "head")
    )
    logging.info("Database migration completed successfully")
