"""Pytest configuration and shared fixtures."""

import os

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("UNSPLASH_ACCESS_KEY", "test-access-key")

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from pixsearch.models import Base, User
from pixsearch.services.event_store import EventStore


@pytest.fixture
def anyio_backend():
    """Use asyncio as the async backend for tests."""
    return "asyncio"


@pytest_asyncio.fixture
async def session_factory():
    """Create an in-memory SQLite database and a session factory bound to it."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        poolclass=StaticPool,
        echo=False,
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield async_sessionmaker(
        engine, class_=AsyncSession, expire_on_commit=False
    )

    await engine.dispose()


@pytest_asyncio.fixture
async def file_session_factory(tmp_path):
    """File-backed SQLite where every session gets its own connection."""
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'events.db'}")

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    await engine.dispose()


@pytest_asyncio.fixture
async def test_db(session_factory):
    """Session on the in-memory test database."""
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def store(test_db: AsyncSession, session_factory) -> EventStore:
    """Event store that writes on its own sessions, as in the app."""
    return EventStore(test_db, session_factory=session_factory)


@pytest_asyncio.fixture
async def sample_user(test_db: AsyncSession) -> User:
    """Create a sample user for testing."""
    user = User(provider="google", provider_id="google-001", name="Test User")
    test_db.add(user)
    await test_db.commit()
    await test_db.refresh(user)
    return user


@pytest_asyncio.fixture
async def other_user(test_db: AsyncSession) -> User:
    user = User(provider="google", provider_id="google-002", name="Other User")
    test_db.add(user)
    await test_db.commit()
    await test_db.refresh(user)
    return user
