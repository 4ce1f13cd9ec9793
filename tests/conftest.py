import os

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

# ------------------------------------------------------------------
# FORCE TESTING MODE
# Must be set BEFORE importing eportal.main so config.py and
# database.py build an in-memory SQLite engine.
# ------------------------------------------------------------------
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["SECRET_KEY"] = "test-secret-key-not-for-production-use"
os.environ["RATE_LIMIT_ENABLED"] = "false"
os.environ["SMTP_HOST"] = ""
os.environ["ENV"] = "test"

from eportal.main import app  # noqa: E402
from eportal.core.database import AsyncSessionLocal, drop_db, engine, init_db  # noqa: E402
from eportal.core.seeding_logic import seed_rbac  # noqa: E402
from eportal.services.auth_service import create_user  # noqa: E402

from factories import DEFAULT_PASSWORD, profile  # noqa: E402


@pytest_asyncio.fixture(autouse=True)
async def database():
    """Fresh schema and seeded roles for every test."""
    await init_db()
    async with AsyncSessionLocal() as session:
        await seed_rbac(session)
    yield
    await drop_db()
    # the in-memory connection is bound to this test's event loop
    await engine.dispose()


@pytest_asyncio.fixture
async def session():
    async with AsyncSessionLocal() as s:
        yield s


@pytest_asyncio.fixture
async def client():
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://testserver") as ac:
        yield ac


@pytest_asyncio.fixture
async def make_user(session):
    """Factory: await make_user("lecturer", email=...) -> User"""

    async def _make(user_type="student", password=DEFAULT_PASSWORD, status="active", **fields):
        data = profile(**fields)
        return await create_user(session, data, password, user_type=user_type, status=status)

    return _make


@pytest_asyncio.fixture
async def login(client):
    """Factory: await login(user) -> Authorization headers for that user."""

    async def _login(user, password=DEFAULT_PASSWORD):
        res = await client.post("/api/auth/sign-in", json={"email": user.email, "password": password})
        assert res.status_code == 200, res.text
        # keep the cookie jar clean so each call is explicit about who it is
        client.cookies.clear()
        return {"Authorization": f"Bearer {res.json()['access_token']}"}

    return _login


@pytest_asyncio.fixture
async def as_role(make_user, login):
    """Factory: await as_role("bursar") -> (user, headers)"""

    async def _as(user_type, **fields):
        user = await make_user(user_type, **fields)
        return user, await login(user)

    return _as
