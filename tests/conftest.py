"""
Shared pytest fixtures for the KPI dashboard test suite.

Provides:
  - ``make_record`` / ``make_target``: plain record factories for the pure
    classification, trend and report functions.
  - ``db_session``: a fresh SQLite database (tmp file) with the schema and
    default seed data applied.
  - ``client``: an ``httpx.AsyncClient`` bound to the FastAPI app, with
    ``get_db`` overridden to the per-test database.
  - ``auth_headers``: bearer headers for the seeded default admin.
"""

from types import SimpleNamespace
from typing import AsyncGenerator

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from app.config import settings
from app.database import Base, get_db
from app.main import app
from app.services.seed import seed_defaults


# ── Plain record factories ───────────────────────────────────────────────────

@pytest.fixture
def make_record():
    counter = {"next_id": 1}

    def _make(member_id: int = 1, month: int = 9, year: int = 2025, record_id=None, **metrics):
        if record_id is None:
            record_id = counter["next_id"]
            counter["next_id"] += 1
        return SimpleNamespace(id=record_id, member_id=member_id, month=month, year=year, metrics=dict(metrics))

    return _make


@pytest.fixture
def make_target():
    def _make(metric_key: str, monthly_target: int, role: str = "SEO Analyst", annual_target=None):
        if annual_target is None:
            annual_target = monthly_target * 13
        return SimpleNamespace(
            metric_key=metric_key, role=role, monthly_target=monthly_target, annual_target=annual_target
        )

    return _make


# ── Database / API fixtures ──────────────────────────────────────────────────

@pytest.fixture
async def session_factory(tmp_path):
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    factory = async_sessionmaker(bind=engine, expire_on_commit=False, class_=AsyncSession)
    async with factory() as session:
        await seed_defaults(session)

    yield factory
    await engine.dispose()


@pytest.fixture
async def db_session(session_factory) -> AsyncGenerator[AsyncSession, None]:
    async with session_factory() as session:
        yield session


@pytest.fixture
async def client(session_factory) -> AsyncGenerator[AsyncClient, None]:
    async def _override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = _override_get_db
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.fixture
async def auth_headers(client) -> dict:
    response = await client.post(
        "/auth/login",
        json={"email": settings.DEFAULT_ADMIN_EMAIL, "password": settings.DEFAULT_ADMIN_PASSWORD},
    )
    assert response.status_code == 200, response.text
    return {"Authorization": f"Bearer {response.json()['access_token']}"}
