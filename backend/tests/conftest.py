"""Shared test fixtures."""

from datetime import datetime, timezone

import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from schema_designer.core.config import Settings
from schema_designer.core.storage import Base, Database
from schema_designer.models.database import Project


def make_settings(**overrides) -> Settings:
    """Settings isolated from the process environment and any .env file."""
    values = {"gemini_api_key": None, "database_url": None}
    values.update(overrides)
    return Settings(_env_file=None, **values)


@pytest.fixture
def settings_factory():
    return make_settings


@pytest.fixture
def settings():
    return make_settings(gemini_api_key="test-key", database_url="sqlite+aiosqlite:///:memory:")


@pytest.fixture
async def db_engine():
    """In-memory SQLite engine with the schema created."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        echo=False,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def db_session(db_engine):
    """Database session for a single test."""
    session_maker = async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)
    async with session_maker() as session:
        yield session


@pytest.fixture
async def database():
    """Connected Database service on an in-memory store."""
    database = Database(
        "sqlite+aiosqlite:///:memory:",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    assert await database.connect()

    yield database

    await database.close()


@pytest.fixture
def sample_conversation():
    return [
        {"role": "user", "content": "I need a blog"},
        {"role": "assistant", "content": "Who writes the posts?"},
    ]


@pytest.fixture
async def sample_project(db_session):
    """A stored project."""
    now = datetime.now(timezone.utc)
    project = Project(
        id="c0ffee00-0000-4000-8000-000000000001",
        name="Blog",
        db_schema={"collections": ["posts"]},
        schema_type="mongodb",
        conversation=[{"role": "user", "content": "I need a blog"}],
        created_at=now,
        updated_at=now,
    )
    db_session.add(project)
    await db_session.commit()
    await db_session.refresh(project)
    return project
