"""API test fixtures — FastAPI app over the in-memory DB, one cookie jar per user.

Invariants:
    - get_db dependency overridden to use the test DB session factory
    - db_manager patched so the readiness probe sees the test engine
    - Each AsyncClient holds its own session cookie (one client == one browser)

Design Decisions:
    - make_client factory: isolation tests need two users logged in at once
    - raise_app_exceptions configurable: the catch-all 500 handler re-raises
      after responding, which httpx would otherwise surface to the test
"""

import pytest
from httpx import ASGITransport, AsyncClient

import taskmanager.infrastructure.database as db_module
from taskmanager.infrastructure.database import DatabaseSessionManager, get_db
from taskmanager.main import app
from tests.api.helpers import login


@pytest.fixture
async def make_client(test_engine, test_session_factory):
    """Factory for AsyncClients sharing the test DB; closes them on teardown."""

    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    clients: list[AsyncClient] = []

    async def _make(raise_app_exceptions: bool = True) -> AsyncClient:
        c = AsyncClient(
            transport=ASGITransport(
                app=app, raise_app_exceptions=raise_app_exceptions,
            ),
            base_url="http://test",
        )
        clients.append(c)
        return c

    yield _make

    for c in clients:
        await c.aclose()
    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


@pytest.fixture
async def client(make_client):
    """Anonymous client."""
    return await make_client()


@pytest.fixture
async def alice(make_client):
    """Client logged in as alice (default categories seeded)."""
    c = await make_client()
    await login(c, "alice")
    return c


@pytest.fixture
async def bob(make_client):
    """Client logged in as bob (default categories seeded)."""
    c = await make_client()
    await login(c, "bob")
    return c
