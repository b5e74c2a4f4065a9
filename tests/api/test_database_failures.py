"""Database Failures over HTTP: driver errors become a generic 500.

Invariants:
    - Any DatabaseError → 500 {"error": "Database error"} on every /users route
    - The driver's message (table names, SQL) never appears in the response
    - Validation still runs before the database is touched (400, not 500)

Design Decisions:
    - Uses a real engine whose database has no users table, so the failure
      comes from SQLite itself rather than from a mock
"""

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine

from users_api.infrastructure.database import DatabaseManager, get_db
from users_api.main import app


@pytest.fixture
async def broken_client():
    engine = create_async_engine("sqlite+aiosqlite:///:memory:")
    manager = DatabaseManager(engine)
    app.dependency_overrides[get_db] = lambda: manager
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
    app.dependency_overrides.clear()
    await engine.dispose()


@pytest.mark.parametrize("method,path,payload", [
    ("POST", "/users", {"name": "Ada", "email": "ada@example.com"}),
    ("GET", "/users", None),
    ("GET", "/users/1", None),
    ("PUT", "/users/1", {"name": "X"}),
    ("DELETE", "/users/1", None),
])
async def test_database_error_returns_generic_500(
    broken_client, method, path, payload,
):
    res = await broken_client.request(method, path, json=payload)
    assert res.status_code == 500
    assert res.json() == {"error": "Database error"}
    assert "no such table" not in res.text


async def test_validation_precedes_database_on_create(broken_client):
    res = await broken_client.post("/users", json={"name": "Ada"})
    assert res.status_code == 400


async def test_validation_precedes_database_on_update(broken_client):
    res = await broken_client.put("/users/1", json={})
    assert res.status_code == 400
