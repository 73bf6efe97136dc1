"""Shared fixtures for the Schichtkalender backend tests.

Uses SQLite (aiosqlite) by default — no PostgreSQL required.
Set TEST_DATABASE_URL to override (e.g. for CI with real PostgreSQL).
"""

import os

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

TEST_DATABASE_URL = os.environ.get("TEST_DATABASE_URL", "sqlite+aiosqlite://")

# Keep the application engine off PostgreSQL when no .env is present
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite://")

from shiftcal.database import Base  # noqa: E402

_engine_kwargs = {}
if TEST_DATABASE_URL.startswith("sqlite"):
    _engine_kwargs = {
        "connect_args": {"check_same_thread": False},
        "poolclass": StaticPool,
    }


# ---------------------------------------------------------------------------
# Holiday fetch failures are remembered per process; start each test clean
# ---------------------------------------------------------------------------

@pytest.fixture(autouse=True)
def _reset_holiday_failures():
    from shiftcal.services import holiday_service

    holiday_service._failed_fetches.clear()
    yield
    holiday_service._failed_fetches.clear()


# ---------------------------------------------------------------------------
# Per-test database: fresh tables, session rolled back afterwards
# ---------------------------------------------------------------------------

@pytest_asyncio.fixture()
async def db_session():
    import shiftcal.models  # noqa: F401 — populate Base.metadata

    engine = create_async_engine(TEST_DATABASE_URL, echo=False, **_engine_kwargs)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)

    session_factory = async_sessionmaker(
        bind=engine, class_=AsyncSession, expire_on_commit=False,
    )
    async with session_factory() as session:
        yield session
        await session.rollback()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


# ---------------------------------------------------------------------------
# HTTP test client
# ---------------------------------------------------------------------------

@pytest_asyncio.fixture()
async def client(db_session: AsyncSession):
    from shiftcal.database import get_db
    from shiftcal.main import app

    async def _override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = _override_get_db

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


# ---------------------------------------------------------------------------
# Convenience: calendar configured for group 1 in 2025
# ---------------------------------------------------------------------------

@pytest_asyncio.fixture()
async def group_one(client: AsyncClient):
    """Configure the calendar for group 1 (anchor 2025-01-30) and year 2025."""
    resp = await client.put("/api/v1/settings/", json={
        "year": 2025,
        "anchor_mode": "group",
        "group": "1",
    })
    assert resp.status_code == 200, resp.text
    return resp.json()
