"""Database Session Manager — async connection pool with rollback, timeouts and health checks.

Invariants:
    - Every session auto-rolls-back on exception (no partial commits leak)
    - Connection pool uses pool_pre_ping for stale connection detection
    - All SQLAlchemy exceptions mapped to QAError(DATABASE_QUERY_ERROR) (core/errors.py)
    - run() bounds every storage operation by timeout_seconds

Design Decisions:
    - No module-level singleton: the manager is built in the app lifespan and
      handed to the Store, which routes receive through a dependency
    - expire_on_commit=False: prevents lazy-load issues in async context
"""

import asyncio
import logging
from collections.abc import Awaitable, Callable
from contextlib import asynccontextmanager
from typing import AsyncGenerator, TypeVar

from sqlalchemy import text
from sqlalchemy.exc import (
    DBAPIError, IntegrityError, OperationalError, SQLAlchemyError,
)
from sqlalchemy.ext.asyncio import (
    AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine,
)

from qa_api.core.errors import ErrorKind, QAError
from qa_api import models  # noqa: F401  (populates Base.metadata)
from qa_api.db.base import Base

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _driver_message(e: SQLAlchemyError) -> str:
    """First line of the underlying driver error, without SQLAlchemy's SQL dump."""
    cause = e.orig if isinstance(e, DBAPIError) and e.orig is not None else e
    return str(cause).splitlines()[0] if str(cause) else type(cause).__name__


class DatabaseSessionManager:
    """Manages async database sessions with pooling, rollback, and health checks."""

    def __init__(
        self,
        database_url: str,
        pool_size: int = 5,
        max_overflow: int = 0,
        timeout_seconds: float = 10.0,
    ):
        engine = create_async_engine(
            database_url,
            pool_size=pool_size,
            max_overflow=max_overflow,
            pool_pre_ping=True,
            pool_recycle=3600,
        )
        self._bind(engine, timeout_seconds)

    @classmethod
    def from_engine(
        cls, engine: AsyncEngine, timeout_seconds: float = 10.0,
    ) -> "DatabaseSessionManager":
        """Wrap an already configured engine (tests, scripts)."""
        manager = cls.__new__(cls)
        manager._bind(engine, timeout_seconds)
        return manager

    def _bind(self, engine: AsyncEngine, timeout_seconds: float) -> None:
        self.engine = engine
        self.timeout_seconds = timeout_seconds
        self._session_factory = async_sessionmaker(
            engine, class_=AsyncSession, expire_on_commit=False,
        )

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """Provide session with auto-rollback on exception."""
        session = self._session_factory()
        try:
            yield session
        except IntegrityError as e:
            await session.rollback()
            logger.error(f"DB integrity error: {e}")
            raise QAError(ErrorKind.DATABASE_QUERY_ERROR, _driver_message(e))
        except OperationalError as e:
            await session.rollback()
            logger.error(f"DB operational error: {e}")
            raise QAError(ErrorKind.DATABASE_QUERY_ERROR, _driver_message(e))
        except SQLAlchemyError as e:
            await session.rollback()
            logger.error(f"SQLAlchemy error: {e}")
            raise QAError(ErrorKind.DATABASE_QUERY_ERROR, _driver_message(e))
        finally:
            await session.close()

    async def run(
        self,
        operation: Callable[[AsyncSession], Awaitable[T]],
        name: str = "query",
    ) -> T:
        """Run one storage operation in its own session under the timeout budget."""
        async def _execute() -> T:
            async with self.session() as db:
                return await operation(db)

        try:
            return await asyncio.wait_for(_execute(), self.timeout_seconds)
        except asyncio.TimeoutError:
            logger.error(f"Storage {name} timed out after {self.timeout_seconds}s")
            raise QAError(
                ErrorKind.DATABASE_QUERY_ERROR,
                f"{name} timed out after {self.timeout_seconds}s",
            )

    async def create_schema(self) -> None:
        """Create all tables known to Base.metadata (tests and local dev)."""
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def health_check(self) -> bool:
        """Check database connectivity (for readiness probes)."""
        try:
            async with self.session() as db:
                await db.execute(text("SELECT 1"))
            return True
        except Exception as e:
            logger.error(f"DB health check failed: {e}")
            return False

    async def dispose(self) -> None:
        await self.engine.dispose()
