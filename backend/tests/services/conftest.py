"""Service test fixtures — async DB, AppState, and FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - app.state.xpd replaced with an AppState over the test engine
    - Follow-ups recorded by a fake notifier instead of posted to the platform
    - Requests signed with a throwaway Ed25519 key the AppState trusts

Design Decisions:
    - SQLite in-memory: fast, no external dependency, sufficient for route tests
      (ADR: PostgreSQL-specific features not exercised here)
    - ASGITransport does not run the lifespan, so the fixture installs AppState itself;
      background tasks still run before the client call returns
"""

import pytest
from httpx import ASGITransport, AsyncClient
from nacl.signing import SigningKey
from sqlalchemy.ext.asyncio import (
    AsyncSession, async_sessionmaker, create_async_engine,
)

from xpd_slash.config import Settings
from xpd_slash.db.base import Base
from xpd_slash.infrastructure.database import DatabaseSessionManager
from xpd_slash.main import app
from xpd_slash.models.level import ExperienceRecord
from xpd_slash.state import AppState

import xpd_slash.models  # noqa: F401 — register all tables on Base.metadata


class RecordingNotifier:
    """Stands in for FollowupNotifier: keeps every delivery in order."""

    def __init__(self, result: bool = True):
        self.deliveries = []
        self.result = result

    async def deliver(self, interaction_id, token, response) -> bool:
        self.deliveries.append({
            "interaction_id": interaction_id,
            "token": token,
            "response": response,
        })
        return self.result


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
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
def signing_key():
    return SigningKey.generate()


@pytest.fixture
def notifier():
    return RecordingNotifier()


@pytest.fixture
def app_state(test_engine, signing_key, notifier):
    return AppState(
        settings=Settings(),
        verify_key=signing_key.verify_key,
        db=DatabaseSessionManager.from_engine(test_engine),
        notifier=notifier,
    )


@pytest.fixture
async def client(app_state):
    """FastAPI test client with AppState installed on the app."""
    app.state.xpd = app_state
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
    del app.state.xpd


@pytest.fixture
def seed_levels(test_db):
    """Insert (user_id, guild_id, xp) rows into the levels table."""
    async def _seed(*rows: tuple[int, int, int]):
        for user_id, guild_id, xp in rows:
            test_db.add(ExperienceRecord(id=user_id, guild=guild_id, xp=xp))
        await test_db.commit()
    return _seed
