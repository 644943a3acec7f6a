"""API test fixtures — isolated app + store per test, httpx ASGI clients.

Invariants:
    - Every test gets a fresh seeded UserStore (ids 1 and 2)
    - `client` carries the API key, `anon_client` carries none
    - Settings built explicitly (no .env), key is "test-key"

Design Decisions:
    - create_app(settings, store) instead of app.dependency_overrides: the
      store is injected at construction, so no global state to restore
    - ASGITransport does not run lifespan: logging is left to caplog
"""

import pytest
from httpx import ASGITransport, AsyncClient

from crud_api.config import Settings
from crud_api.infrastructure.user_store import UserStore
from crud_api.main import create_app

API_KEY = "test-key"


@pytest.fixture
def settings():
    return Settings(_env_file=None, api_key=API_KEY, log_format="text")


@pytest.fixture
def store():
    return UserStore.with_seed_data()


@pytest.fixture
def app(settings, store):
    return create_app(settings, store)


@pytest.fixture
async def client(app):
    """Authenticated client."""
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
        headers={"X-API-KEY": API_KEY},
    ) as c:
        yield c


@pytest.fixture
async def anon_client(app):
    """Client without the API key header."""
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
