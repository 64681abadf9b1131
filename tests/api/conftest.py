"""API test fixtures: isolated app + store per test, httpx client over ASGI.

Invariants:
    - Every test gets a fresh PersonStore, shared by the app and the test
    - No sockets: requests go through ASGITransport
"""

import pytest
from httpx import ASGITransport, AsyncClient

from person_service.config import Settings
from person_service.core.person_store import PersonStore
from person_service.main import create_app


@pytest.fixture
def store():
    return PersonStore()


@pytest.fixture
def settings():
    return Settings(resource_prefix="/resource", log_format="text")


@pytest.fixture
def app(settings, store):
    return create_app(settings, store)


@pytest.fixture
async def client(app):
    """FastAPI test client bound to the per-test app."""
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
