"""API test fixtures — FastAPI test client over a fresh registry.

Invariants:
    - Every test gets its own seeded UserRegistry (get_registry overridden)
    - Limiter storage is cleared before each test so quotas never leak

Design Decisions:
    - httpx AsyncClient over ASGITransport: exercises the real app, middleware included
    - Lifespan is not run by ASGITransport; the app already owns a registry at import
"""

import pytest
from httpx import ASGITransport, AsyncClient

from users_api.api.dependencies import get_registry
from users_api.api.rate_limit import limiter
from users_api.config import get_settings
from users_api.main import app


@pytest.fixture
async def client(registry):
    """FastAPI test client with the registry dependency overridden."""
    app.dependency_overrides[get_registry] = lambda: registry
    limiter.reset()

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()


@pytest.fixture
def tight_rate_limit(monkeypatch):
    """Shrink the /users quota to 3 requests per minute for one test."""
    monkeypatch.setenv("USERS_RATE_LIMIT", "3/minute")
    get_settings.cache_clear()
    yield "3/minute"
    get_settings.cache_clear()


@pytest.fixture
async def seeded_ids(client):
    """Ids of the seed users, in seed order, as served by the API."""
    res = await client.get("/users")
    return [u["id"] for u in res.json()["users"]]
