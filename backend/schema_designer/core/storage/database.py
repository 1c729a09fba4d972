"""Async database engine and session handling."""

import asyncio
import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import declarative_base

logger = logging.getLogger(__name__)

Base = declarative_base()


class Database:
    """Process-wide handle on the project store.

    Built once at startup and closed at shutdown. Request handlers get
    sessions from it through the API dependencies.
    """

    def __init__(self, url: str, echo: bool = False, **engine_kwargs):
        self.url = url
        self.echo = echo
        self.engine_kwargs = engine_kwargs
        self.engine: AsyncEngine | None = None
        self._session_maker: async_sessionmaker[AsyncSession] | None = None

    @property
    def is_connected(self) -> bool:
        return self._session_maker is not None

    async def connect(self) -> bool:
        """
        Create the engine, the tables and their indexes, then ping.

        Returns:
            True if the store is reachable, False otherwise
        """
        # Register models on Base.metadata
        from schema_designer.models.database import Project  # noqa: F401

        try:
            self.engine = create_async_engine(self.url, echo=self.echo, **self.engine_kwargs)
            async with self.engine.begin() as conn:
                await conn.run_sync(Base.metadata.create_all)
                await conn.execute(text("SELECT 1"))
        except (SQLAlchemyError, OSError, ImportError, asyncio.TimeoutError) as e:
            logger.error("Error connecting to database: %s", e)
            await self.close()
            return False

        self._session_maker = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )
        logger.info("Connected to database successfully")
        return True

    async def ping(self) -> bool:
        """Check that the store answers a trivial query."""
        if self.engine is None or not self.is_connected:
            return False
        try:
            async with self.engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
        except (SQLAlchemyError, OSError, asyncio.TimeoutError) as e:
            logger.error("Database connection test failed: %s", e)
            return False
        return True

    @asynccontextmanager
    async def session(self) -> AsyncIterator[AsyncSession]:
        """Yield a session bound to this database."""
        if self._session_maker is None:
            raise RuntimeError("Database is not connected")
        async with self._session_maker() as session:
            yield session

    async def close(self) -> None:
        """Dispose of the engine and its connection pool."""
        self._session_maker = None
        if self.engine is not None:
            await self.engine.dispose()
            self.engine = None
