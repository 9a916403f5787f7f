"""Database engine, session factory and request-scoped sessions."""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import Request
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from marketplace.core.exceptions import StorageError

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    """Declarative base for all models."""


class Database:
    """Owns the async engine for the lifetime of the application.

    Created and opened during application startup, closed on shutdown.
    Nothing in the request path reaches for a module-level engine; handlers
    get their session from the instance stored on ``app.state``.
    """

    def __init__(self, url: str, pool_size: int = 20, max_overflow: int = 10) -> None:
        self.url = url
        self.pool_size = pool_size
        self.max_overflow = max_overflow
        self._engine: AsyncEngine | None = None
        self._sessionmaker: async_sessionmaker[AsyncSession] | None = None

    @property
    def engine(self) -> AsyncEngine:
        if self._engine is None:
            raise RuntimeError("Database is not open")
        return self._engine

    def open(self) -> None:
        """Create the engine and session factory."""
        if self._engine is not None:
            return

        engine_kwargs: dict = {"pool_pre_ping": True}
        if not self.url.startswith("sqlite"):
            engine_kwargs["pool_size"] = self.pool_size
            engine_kwargs["max_overflow"] = self.max_overflow

        self._engine = create_async_engine(self.url, **engine_kwargs)
        self._sessionmaker = async_sessionmaker(self._engine, expire_on_commit=False)
        logger.info(f"Database engine opened ({self._engine.url.render_as_string(hide_password=True)})")

    async def close(self) -> None:
        """Dispose of the engine and its connection pool."""
        if self._engine is None:
            return
        await self._engine.dispose()
        self._engine = None
        self._sessionmaker = None
        logger.info("Database engine closed")

    async def create_all(self) -> None:
        """Create tables from model metadata (development only)."""
        # Register models on the metadata
        import marketplace.models  # noqa: F401

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def drop_all(self) -> None:
        import marketplace.models  # noqa: F401

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """Transactional session: commit on success, rollback on error."""
        if self._sessionmaker is None:
            raise RuntimeError("Database is not open")

        async with self._sessionmaker() as session:
            try:
                yield session
            except Exception:
                await session.rollback()
                raise

            try:
                await session.commit()
            except SQLAlchemyError as e:
                await session.rollback()
                logger.error(f"Commit failed: {e}")
                raise StorageError(e.__class__.__name__) from e


async def get_db(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency yielding a session bound to the app's database."""
    database: Database = request.app.state.database
    async with database.session() as session:
        yield session
