"""Root conftest: async DB + FastAPI test client.

Invariants:
    - Tests never reach a real MySQL server; DATABASE_URL points at SQLite
    - Every test gets a fresh in-memory SQLite database with the users table
    - get_db dependency overridden to return a DatabaseManager on that engine

Design Decisions:
    - SQLite in-memory through aiosqlite: the raw SQL statements are portable,
      so route tests exercise the real executor
    - httpx ASGITransport does not run the lifespan hook, so no pool is built
      from settings during tests
"""

import os

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("LOG_FORMAT", "text")

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import create_async_engine  # noqa: E402

from users_api.db.base import Base  # noqa: E402
from users_api.infrastructure.database import DatabaseManager, get_db  # noqa: E402
from users_api.main import app  # noqa: E402
import users_api.models  # noqa: E402,F401


@pytest.fixture
async def test_engine():
    engine = create_async_engine("sqlite+aiosqlite:///:memory:", echo=False)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
async def db(test_engine):
    return DatabaseManager(test_engine)


@pytest.fixture
async def client(db):
    """FastAPI test client with the DB dependency overridden."""
    app.dependency_overrides[get_db] = lambda: db

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()


@pytest.fixture
async def seed_user(db):
    """Insert one user directly through the executor."""
    result = await db.execute(
        "INSERT INTO users (name, email) VALUES (?, ?)",
        ("Ada", "ada@example.com"),
    )
    return {"id": result.generated_id, "name": "Ada", "email": "ada@example.com"}
