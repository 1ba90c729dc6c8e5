"""API test fixtures — FastAPI app + httpx client over an in-memory SQLite database.

Invariants:
    - get_db overridden to hand out sessions from the test engine
    - get_password_hasher overridden with the fake hasher (Argon2 is covered separately)
    - db_manager patched so the readiness probe sees the test engine
    - Unhandled exceptions are rendered, not re-raised (raise_app_exceptions=False)

Design Decisions:
    - A fresh app per test via create_app(): dependency overrides never leak
    - Lifespan not run by ASGITransport; the test engine fixture creates the schema
"""

import pytest
from httpx import ASGITransport, AsyncClient

from user_registry.api.dependencies import get_password_hasher
from user_registry.infrastructure.database import get_db, DatabaseSessionManager
import user_registry.infrastructure.database as db_module
from user_registry.main import create_app
from tests.fakes import FakePasswordHasher


@pytest.fixture
def app():
    return create_app()


@pytest.fixture
async def client(app, test_engine, test_session_factory):
    """Test client with DB and hasher dependencies overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    hasher = FakePasswordHasher()
    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_password_hasher] = lambda: hasher

    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app, raise_app_exceptions=False),
        base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


@pytest.fixture
async def alice(client):
    """A created user, as returned by POST /api/v1/users."""
    res = await client.post("/api/v1/users", json={
        "username": "alice", "email": "alice@x.com", "password": "secret",
        "firstName": "Alice",
    })
    assert res.status_code == 201
    return res.json()
