"""Root conftest — shared test configuration and the in-memory Store."""

import os

import pytest
from sqlalchemy import event
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.pool import StaticPool

from qa_api.infrastructure.database import DatabaseSessionManager
from qa_api.infrastructure.repositories import Store

# Ensure tests don't accidentally hit the real moderation service or database
os.environ.setdefault("MODERATION_API_KEY", "test-fake-key")
os.environ.setdefault("MODERATION_URL", "http://moderation.test/bad_words")
os.environ.setdefault(
    "DATABASE_URL",
    "sqlite+aiosqlite:///test.db",
)


@pytest.fixture
async def test_engine():
    """In-memory SQLite; StaticPool keeps one connection so all sessions share it.

    Foreign keys are switched on so the answers → questions constraint behaves
    as it does on Postgres.
    """
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False, poolclass=StaticPool,
    )

    @event.listens_for(engine.sync_engine, "connect")
    def _enable_foreign_keys(dbapi_connection, _record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    yield engine
    await engine.dispose()


@pytest.fixture
async def store(test_engine):
    manager = DatabaseSessionManager.from_engine(test_engine, timeout_seconds=5.0)
    await manager.create_schema()
    return Store.from_manager(manager)
