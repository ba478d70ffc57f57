"""Tests for the feed loading command."""

import argparse
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock, patch

from sqlalchemy import func, select

from movielocations.database import create_session_factory
from movielocations.models import Movie
from movielocations.scripts import load_feed
from movielocations.tasks.update_job import UpdateResult


async def test_load_file_creates_tables_and_stores_movies(sqlite_engine, feed_path: Path) -> None:
    session_factory = create_session_factory(sqlite_engine)

    with patch("movielocations.scripts.load_feed.AsyncSessionLocal", session_factory):
        await load_feed.load_file(str(feed_path))

    async with session_factory() as db:
        assert await db.scalar(select(func.count()).select_from(Movie)) == 3


async def test_main_with_file_disposes_engine(sqlite_engine, feed_path: Path) -> None:
    engine = MagicMock()
    engine.dispose = AsyncMock()
    args = argparse.Namespace(file=str(feed_path), url=None, skip_info=False)

    with (
        patch("movielocations.scripts.load_feed.AsyncSessionLocal", create_session_factory(sqlite_engine)),
        patch("movielocations.scripts.load_feed.engine", engine),
    ):
        await load_feed.main(args)

    engine.dispose.assert_awaited_once()


async def test_main_with_url_runs_update() -> None:
    engine = MagicMock()
    engine.dispose = AsyncMock()
    run_update = AsyncMock(return_value=UpdateResult(movies=3, locations=4, movie_infos=0))
    args = argparse.Namespace(file=None, url="https://example.test/feed.json", skip_info=True)

    with (
        patch("movielocations.scripts.load_feed.run_update", run_update),
        patch("movielocations.scripts.load_feed.engine", engine),
    ):
        await load_feed.main(args)

    kwargs = run_update.call_args.kwargs
    assert kwargs["feed_url"] == "https://example.test/feed.json"
    assert kwargs["fetch_info"] is False
    engine.dispose.assert_awaited_once()
