"""Pytest configuration and fixtures for taskmanager.

Environment is set before any taskmanager import so the cached Settings see
it. Repository and HTTP tests run against a throwaway SQLite file (aiosqlite);
the schema is created before and dropped after each test that asks for it.
"""

import os
import tempfile
import uuid

_TEST_DB_DIR = tempfile.mkdtemp(prefix="taskmanager-tests-")
os.environ["DATABASE_URL"] = (
    f"sqlite+aiosqlite:///{os.path.join(_TEST_DB_DIR, 'test.db')}"
)
os.environ["SECRET_KEY"] = "test-secret-key-not-for-production"
os.environ["DATABASE_CREATE_TABLES"] = "false"

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncSession  # noqa: E402

from taskmanager.core.limiter import limiter  # noqa: E402
from taskmanager.infrastructure.persistence import database  # noqa: E402
from taskmanager.main import app  # noqa: E402

TEST_PASSWORD = "correct-horse-battery"


@pytest.fixture
async def database_schema():
    """Create all tables for one test; drop them and dispose the engine afterwards."""
    await database.init_models()
    yield
    await database.drop_models()
    await database.dispose_engine()


@pytest.fixture
async def client(database_schema) -> AsyncClient:
    """Async HTTP client against the FastAPI app (ASGI); rate limit counters start empty."""
    limiter.reset()
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
async def db_session(database_schema) -> AsyncSession:
    """Database session for repository tests. Rolls back after test."""
    factory = database._session_factory()
    async with factory() as session:
        yield session
        await session.rollback()


@pytest.fixture
def register_user(client: AsyncClient):
    """Return a coroutine that registers through the API and returns the JSON body."""

    async def _register(
        email: str | None = None,
        password: str = TEST_PASSWORD,
    ) -> dict:
        response = await client.post(
            "/api/v1/auth/register",
            json={
                "email": email or f"user-{uuid.uuid4().hex[:8]}@example.com",
                "password": password,
                "first_name": "Test",
                "last_name": "User",
            },
        )
        assert response.status_code == 201, response.text
        return response.json()

    return _register


@pytest.fixture
async def auth_headers(register_user) -> dict[str, str]:
    """Register a fresh user and return Authorization headers for it."""
    body = await register_user()
    return {"Authorization": f"Bearer {body['token']}"}


@pytest.fixture
async def other_auth_headers(register_user) -> dict[str, str]:
    """A second, unrelated user."""
    body = await register_user()
    return {"Authorization": f"Bearer {body['token']}"}
