"""
Async session manager.

``Database.init`` is called once at application startup; each
``async with Database() as session`` block gets its own session that is
committed on success and rolled back on error.
"""
import logging
from typing import Any

from sqlalchemy.engine.url import URL
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from carbon_tracker.database.session_manager.exceptions import (
    DatabaseNotInitialized,
    DatabaseTransactionError,
)

logger = logging.getLogger(__name__)


class Database:
    """Process-wide engine and session factory, per-block sessions."""

    _engine: AsyncEngine | None = None
    _async_session_maker: async_sessionmaker | None = None

    def __init__(self):
        self._session: AsyncSession | None = None

    @classmethod
    def init(cls, async_db_url: URL, engine_kw: dict[str, Any] | None = None):
        """
        Create the engine and session factory.

        Args:
            async_db_url: Async database URL
            engine_kw: Extra keyword arguments for create_async_engine
        """
        cls._engine = create_async_engine(async_db_url, **(engine_kw or {}))
        cls._async_session_maker = async_sessionmaker(
            bind=cls._engine, expire_on_commit=False, class_=AsyncSession
        )
        logger.info(f"Database initialised for {async_db_url.get_backend_name()}")

    @classmethod
    async def close(cls):
        """Dispose of the engine and its connection pool."""
        if cls._engine is not None:
            await cls._engine.dispose()
            logger.info("Database engine disposed")
        cls._engine = None
        cls._async_session_maker = None

    async def __aenter__(self) -> AsyncSession:
        if self._async_session_maker is None:
            raise DatabaseNotInitialized(
                "Database not initialized. Call Database.init() first."
            )
        self._session = self._async_session_maker()
        return self._session

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        try:
            if exc_type is None:
                await self._session.commit()
            else:
                await self._session.rollback()
        except SQLAlchemyError as e:
            await self._session.rollback()
            logger.error(f"Transaction failed: {e}")
            raise DatabaseTransactionError(str(e)) from e
        finally:
            await self._session.close()
