"""Load the film locations feed into the database from the command line."""

import argparse
import asyncio
import logging

from movielocations.config import settings
from movielocations.database import AsyncSessionLocal, engine
from movielocations.feed.client import load_from_file
from movielocations.persistence.initializer import DatabaseInitializer, create_tables
from movielocations.persistence.writer import store_movies
from movielocations.tasks.update_job import run_update

logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")
logger = logging.getLogger(__name__)


async def load_file(path: str) -> None:
    movies = load_from_file(path)
    async with AsyncSessionLocal() as db:
        await create_tables(db)
        await store_movies(db, movies)
    logger.info(f"Loaded {len(movies)} movies from {path}")


async def main(args: argparse.Namespace) -> None:
    try:
        if args.file:
            await load_file(args.file)
        else:
            initializer = DatabaseInitializer(AsyncSessionLocal)
            result = await run_update(
                initializer,
                feed_url=args.url,
                fetch_info=not args.skip_info,
            )
            logger.info(
                f"Done: {result.movies} movies, {result.locations} locations, "
                f"{result.movie_infos} new movie infos"
            )
    finally:
        await engine.dispose()


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description=__doc__)
    source = parser.add_mutually_exclusive_group()
    source.add_argument("--file", help="Load a cached copy of the feed instead of fetching it")
    source.add_argument("--url", default=settings.feed_url, help="Feed URL")
    parser.add_argument(
        "--skip-info",
        action="store_true",
        help="Do not fetch movie info for new titles (URL loads only)",
    )
    asyncio.run(main(parser.parse_args()))
