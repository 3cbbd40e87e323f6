"""Service test fixtures — async DB, SQL-backed workspace + FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database seeded with the demo records
    - get_workspace dependency overridden with a workspace pinned to 2025-10-01
    - db_manager patched so the readiness probe sees the test database

Design Decisions:
    - SQLite in-memory: fast, no external dependency, sufficient for route tests
    - Fake DatabaseSessionManager built with __new__: reuses session() error mapping
      without creating a second engine
    - Zero apply delay: route tests never wait on simulated latency
"""

from datetime import date

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from httpx import ASGITransport, AsyncClient

from pursuit.db.base import Base
from pursuit.infrastructure.application_repository import SqlApplicationRepository
from pursuit.infrastructure.database import DatabaseSessionManager
from pursuit.infrastructure.preference_store import SqlPreferenceStore
from pursuit.infrastructure.seed_applications import seed_if_empty
from pursuit.services.filter_workspace import FilterWorkspace, get_workspace
import pursuit.infrastructure.database as db_module
from pursuit.main import app

TODAY = date(2025, 10, 1)


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
def test_manager(test_engine, test_session_factory):
    manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    manager.engine = test_engine
    manager._session_factory = test_session_factory
    return manager


@pytest.fixture
async def repository(test_manager):
    repo = SqlApplicationRepository(test_manager)
    await seed_if_empty(repo)
    return repo


@pytest.fixture
def preference_store(test_manager):
    return SqlPreferenceStore(test_manager)


@pytest.fixture
async def sql_workspace(preference_store, repository):
    ws = FilterWorkspace(
        store=preference_store, repository=repository, today=lambda: TODAY,
    )
    await ws.load()
    return ws


@pytest.fixture
async def client(test_manager, sql_workspace):
    """FastAPI test client with the workspace dependency overridden."""
    app.dependency_overrides[get_workspace] = lambda: sql_workspace

    original_manager = db_module.db_manager
    db_module.db_manager = test_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager
