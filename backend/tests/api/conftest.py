"""API test fixtures: FastAPI test client bound to the test database.

Invariants:
    - get_db dependency overridden to use the test DB session
    - db_manager points at the test engine while the client is open
"""

import pytest
from httpx import ASGITransport, AsyncClient

from user_api.infrastructure.database import get_db, DatabaseSessionManager
import user_api.infrastructure.database as db_module
from user_api.main import app


@pytest.fixture
async def client(test_engine, test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


@pytest.fixture
def store_calls(monkeypatch):
    """Replace user_store.create with a recorder that must not be reached."""
    calls = []

    async def _fake_create(db, name, age, department):
        calls.append((name, age, department))
        raise AssertionError("store reached")

    monkeypatch.setattr(
        "user_api.infrastructure.user_store.create", _fake_create,
    )
    return calls
