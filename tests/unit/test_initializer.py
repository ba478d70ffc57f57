"""Tests for first-time database initialization."""

import asyncio
from pathlib import Path

import pytest
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncEngine

from movielocations.database import create_session_factory
from movielocations.feed import FeedDecodeError
from movielocations.models import Location, Movie
from movielocations.persistence.initializer import DatabaseInitializer, has_tables


@pytest.fixture
def initializer(sqlite_engine: AsyncEngine) -> DatabaseInitializer:
    return DatabaseInitializer(create_session_factory(sqlite_engine))


async def tables_exist(initializer: DatabaseInitializer) -> bool:
    async with initializer.session_factory() as db:
        return await has_tables(db)


async def count_movies(initializer: DatabaseInitializer) -> int:
    async with initializer.session_factory() as db:
        return await db.scalar(select(func.count()).select_from(Movie))


async def test_loads_cached_feed_into_empty_database(
    initializer: DatabaseInitializer, feed_path: Path
) -> None:
    assert not await tables_exist(initializer)

    assert await initializer.ensure_initialized(feed_path) is True

    assert initializer.initialized
    assert await count_movies(initializer) == 3
    async with initializer.session_factory() as db:
        assert await db.scalar(select(func.count()).select_from(Location)) == 4


async def test_second_call_does_nothing(initializer: DatabaseInitializer, feed_path: Path) -> None:
    await initializer.ensure_initialized(feed_path)

    assert await initializer.ensure_initialized(feed_path) is False
    assert await count_movies(initializer) == 3


async def test_existing_tables_are_not_reloaded(
    sqlite_engine: AsyncEngine, feed_path: Path, tmp_path: Path
) -> None:
    await DatabaseInitializer(create_session_factory(sqlite_engine)).ensure_initialized(feed_path)

    # A new process sees the tables and never reads the feed file
    restarted = DatabaseInitializer(create_session_factory(sqlite_engine))
    assert await restarted.ensure_initialized(tmp_path / "missing.json") is False
    assert restarted.initialized
    assert await count_movies(restarted) == 3


async def test_concurrent_calls_initialize_once(
    initializer: DatabaseInitializer, feed_path: Path
) -> None:
    results = await asyncio.gather(
        initializer.ensure_initialized(feed_path),
        initializer.ensure_initialized(feed_path),
    )

    assert sorted(results) == [False, True]
    assert await count_movies(initializer) == 3


async def test_missing_feed_file(initializer: DatabaseInitializer, tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        await initializer.ensure_initialized(tmp_path / "missing.json")

    assert not initializer.initialized
    assert not await tables_exist(initializer)


async def test_invalid_feed_file_creates_nothing(
    initializer: DatabaseInitializer, tmp_path: Path, feed_path: Path
) -> None:
    bad_feed = tmp_path / "feed.json"
    bad_feed.write_bytes(b"\xff\xfe not json")

    with pytest.raises(FeedDecodeError):
        await initializer.ensure_initialized(bad_feed)

    assert not initializer.initialized
    assert not await tables_exist(initializer)

    # A later attempt with a valid file still succeeds
    assert await initializer.ensure_initialized(feed_path) is True
