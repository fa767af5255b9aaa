"""
Database engine and session management.
"""

from typing import Any

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import declarative_base

from sales_api.core.config import settings

# Base class for all models
Base = declarative_base()


class Database:
    """
    Owns the connection pool for one application instance.

    The async engine keeps a bounded pool of connections (``pool_size`` plus
    ``max_overflow``); callers beyond that wait for a connection to be
    returned. Each ``session()`` checks a connection out for one logical
    operation and returns it when the session closes.

    ``pool_options`` go straight to ``create_async_engine``; without them the
    pool is sized from ``DB_POOL_SIZE`` and ``DB_MAX_OVERFLOW``.
    """

    def __init__(self, url: str, echo: bool = settings.DEBUG, **pool_options: Any) -> None:
        self.url = url
        if not pool_options:
            pool_options = {"pool_size": settings.DB_POOL_SIZE, "max_overflow": settings.DB_MAX_OVERFLOW}

        self.engine: AsyncEngine = create_async_engine(url, echo=echo, pool_pre_ping=True, **pool_options)
        self.session_factory = async_sessionmaker(
            bind=self.engine,
            expire_on_commit=False,
            autoflush=False,
            autocommit=False,
            class_=AsyncSession,
        )

    def session(self) -> AsyncSession:
        """Open a new session bound to the pool."""
        return self.session_factory()

    async def dispose(self) -> None:
        """Close every pooled connection."""
        await self.engine.dispose()


def create_database() -> Database:
    """
    Build the application database from settings.
    """
    return Database(str(settings.DATABASE_URI))
