"""Shared test fixtures."""

from collections.abc import AsyncGenerator
from pathlib import Path

import pytest
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from movielocations.api.routes import admin, health, movies
from movielocations.database import create_session_factory
from movielocations.models import Base

FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture
def feed_path() -> Path:
    """Small cached copy of the film locations feed."""
    return FIXTURES / "feed_sample.json"


@pytest.fixture
def test_app() -> FastAPI:
    """Minimal FastAPI app without the initialization lifespan, for API tests."""
    app = FastAPI()
    app.include_router(health.router)
    app.include_router(movies.router, prefix="/api")
    app.include_router(admin.router, prefix="/api")
    return app


@pytest.fixture
async def sqlite_engine() -> AsyncGenerator[AsyncEngine, None]:
    """In-memory SQLite engine without any tables."""
    engine = create_async_engine("sqlite+aiosqlite://", poolclass=StaticPool)
    yield engine
    await engine.dispose()


@pytest.fixture
async def session_factory(sqlite_engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Session factory for an in-memory database with all tables created."""
    async with sqlite_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    return create_session_factory(sqlite_engine)


@pytest.fixture
async def db_session(
    session_factory: async_sessionmaker[AsyncSession],
) -> AsyncGenerator[AsyncSession, None]:
    async with session_factory() as session:
        yield session
