"""Root conftest — environment, in-memory database, fake mail transport, HTTP client.

Invariants:
    - Every test gets a fresh in-memory SQLite database with foreign keys enforced
    - get_db and get_mailer are overridden; nothing leaves the process
    - app.state.db points at the test engine for code that reads it directly

Design Decisions:
    - SQLite in-memory: fast, no external dependency; PRAGMA foreign_keys=ON makes
      cascades and FK failures behave like PostgreSQL
    - StaticPool: one shared connection, so the test session and request sessions
      see the same in-memory database
    - Low bcrypt cost: hashing at cost 10 would dominate the suite's runtime
"""

import os

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("MAIL_HOST", "")
os.environ.setdefault("LOG_FORMAT", "text")

from datetime import datetime, timezone  # noqa: E402

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncSession, create_async_engine, async_sessionmaker,
)
from sqlalchemy.pool import StaticPool  # noqa: E402

from bootcamp.api.dependencies import get_mailer  # noqa: E402
from bootcamp.config import get_settings  # noqa: E402
from bootcamp.core.domain_types import AdminId, AdminIdentity  # noqa: E402
from bootcamp.db.base import Base  # noqa: E402
from bootcamp.infrastructure.database import (  # noqa: E402
    DatabaseSessionManager, enable_sqlite_foreign_keys, get_db,
)
from bootcamp.infrastructure.security import issue_token  # noqa: E402
from bootcamp.main import app  # noqa: E402
from bootcamp.repositories import cohorts, tracks  # noqa: E402
from tests.factories import FakeMailer, RecordingNotifier  # noqa: E402

@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False, poolclass=StaticPool,
    )
    enable_sqlite_foreign_keys(engine)
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
def notifier():
    return RecordingNotifier()


@pytest.fixture
def fake_mailer():
    return FakeMailer()


@pytest.fixture
async def client(test_engine, test_session_factory, fake_mailer):
    """FastAPI test client with DB and mailer dependencies overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_mailer] = lambda: fake_mailer

    manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    manager.engine = test_engine
    manager._session_factory = test_session_factory
    app.state.db = manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    del app.state.db


@pytest.fixture
def auth_headers():
    """Bearer token for an admin identity (no admin row required)."""
    settings = get_settings()
    token = issue_token(
        AdminIdentity(id=AdminId(1), username="admin1"), settings.secret_key,
    )
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
async def seed_track(test_db):
    track = await tracks.create(
        test_db, title="Backend", description="APIs, databases and services",
    )
    await test_db.commit()
    return track


@pytest.fixture
async def seed_cohort(test_db):
    cohort = await cohorts.create(
        test_db,
        title="Cohort 5",
        start_date=datetime(2026, 11, 2, 9, 0, tzinfo=timezone.utc),
        orientation_date=datetime(2026, 10, 30, 9, 0, tzinfo=timezone.utc),
        duration="12 weeks",
    )
    await test_db.commit()
    return cohort
