"""Database engine and session management with the psycopg3 async driver.

The engine and its connection pool live on a :class:`Database` handle that
the application lifespan creates and disposes. Nothing here is a module
level singleton; callers receive the handle (or its session factory)
explicitly.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING, Any

from sqlalchemy import event, text
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

    from sqlalchemy.ext.asyncio import AsyncEngine

    from cardgraph.core.settings.postgres import PostgresSettings

logger = logging.getLogger(__name__)


class Database:
    """Owner of one async engine, its pool and a session factory.

    Example:
        database = Database.from_settings(get_db_settings())
        async with database.session() as session:
            await session.execute(select(Card))
        await database.dispose()

    Attributes:
        engine: SQLAlchemy async engine.
        session_factory: Factory for request-scoped sessions.
    """

    def __init__(self, url: str, **engine_kwargs: Any) -> None:
        self.engine: AsyncEngine = create_async_engine(url, **engine_kwargs)
        self.session_factory: async_sessionmaker[AsyncSession] = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
            autoflush=False,
        )
        _instrument_pool(self.engine)

    @classmethod
    def from_settings(cls, settings: PostgresSettings) -> Database:
        """Build a handle from database settings."""
        return cls(settings.url, **settings.sqlalchemy_engine_kwargs())

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession]:
        """Get an async session that is closed on exit.

        Example:
            async with database.session() as session:
                result = await session.execute(select(Card))
        """
        async with self.session_factory() as session:
            yield session

    async def check(self) -> None:
        """Run ``SELECT 1``; raises the driver error if the store is unreachable."""
        async with self.engine.connect() as conn:
            await conn.execute(text("SELECT 1"))

    async def create_all(self) -> None:
        """Create every mapped table that does not exist yet."""
        from cardgraph.core.database import Base
        from cardgraph.features.cards import models  # noqa: F401

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("Database tables ensured", extra={"tables": sorted(Base.metadata.tables)})

    async def dispose(self) -> None:
        """Close every pooled connection."""
        await self.engine.dispose()
        logger.info("Database engine disposed")


def _instrument_pool(engine: AsyncEngine) -> None:
    """Log pool lifecycle events at DEBUG."""

    @event.listens_for(engine.sync_engine.pool, "connect")
    def _receive_connect(dbapi_conn: Any, connection_record: Any) -> None:
        _ = dbapi_conn, connection_record
        logger.debug("Database connection established")

    @event.listens_for(engine.sync_engine.pool, "checkout")
    def _receive_checkout(dbapi_conn: Any, connection_record: Any, connection_proxy: Any) -> None:
        _ = dbapi_conn, connection_record, connection_proxy
        logger.debug("Connection checked out from pool")

    @event.listens_for(engine.sync_engine.pool, "checkin")
    def _receive_checkin(dbapi_conn: Any, connection_record: Any) -> None:
        _ = dbapi_conn, connection_record
        logger.debug("Connection checked in to pool")


__all__ = ["Database"]
