"""API test fixtures — FastAPI test client over the in-memory SQLite Store.

Invariants:
    - get_store / get_moderation overridden; the lifespan never runs
    - moderation is a FakeModeration the test can arm with an error
"""

import pytest
from httpx import ASGITransport, AsyncClient

from qa_api.api.dependencies import get_moderation, get_store
from qa_api.main import app
from tests.fakes import FakeModeration


@pytest.fixture
def moderation():
    return FakeModeration()


@pytest.fixture
async def client(store, moderation):
    """FastAPI test client with Store and moderation dependencies overridden."""
    app.dependency_overrides[get_store] = lambda: store
    app.dependency_overrides[get_moderation] = lambda: moderation

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()


@pytest.fixture
async def seed_question(client):
    """Create one question through the API and return its JSON."""
    res = await client.post("/questions", json={
        "title": "How do I parse JSON?",
        "content": "Looking for the idiomatic way.",
        "tags": ["json", "parsing"],
    })
    assert res.status_code == 200
    return res.json()["data"]["Question"]
