"""Feed update job: re-ingests the feed and fetches missing movie info."""

import logging
from dataclasses import dataclass

from movielocations.feed.client import fetch_from_url
from movielocations.persistence.initializer import DatabaseInitializer, create_tables
from movielocations.persistence.queries import load_movie_info_jsons
from movielocations.persistence.writer import store_movie_infos, store_movies
from movielocations.services.omdb_client import OMDbClient

logger = logging.getLogger(__name__)


@dataclass
class UpdateResult:
    """Counts of a completed update."""

    movies: int
    locations: int
    movie_infos: int


async def run_update(
    initializer: DatabaseInitializer,
    feed_url: str | None = None,
    omdb_client: OMDbClient | None = None,
    fetch_info: bool = True,
) -> UpdateResult:
    """
    Replace the stored movies with the current feed and enrich new titles.

    Holds the initializer's lock for the whole update so it never overlaps
    with initialization or with another update. The feed is fetched and
    decoded before the database is touched; movies are then replaced in one
    transaction. Movie info is fetched afterwards for titles without a stored
    payload. A failed lookup is skipped and retried on the next update.

    Args:
        initializer: Guard owning the ingestion lock and session factory
        feed_url: Feed URL (uses settings if not provided)
        omdb_client: Movie-info client (creates default if not provided)
        fetch_info: Whether to fetch movie info for new titles

    Returns:
        Counts of stored movies and locations and of newly stored movie infos
    """
    async with initializer.lock:
        logger.info("Starting feed update")
        movies = await fetch_from_url(feed_url)

        async with initializer.session_factory() as db:
            await create_tables(db)
            await store_movies(db, movies)

            stored_infos = 0
            if fetch_info:
                omdb_client = omdb_client or OMDbClient()
                known = await load_movie_info_jsons(db)
                # No transaction stays open during the lookups
                await db.rollback()

                infos: dict[str, str] = {}
                for movie in movies:
                    if movie.title in known:
                        continue
                    info_json = await omdb_client.fetch_movie_info(movie.title)
                    if info_json is None:
                        continue
                    infos[movie.title] = info_json

                stored_infos = await store_movie_infos(db, infos)

    location_count = sum(len(m.locations) for m in movies)
    logger.info(
        f"Feed update complete: {len(movies)} movies, {location_count} locations, "
        f"{stored_infos} new movie infos"
    )
    return UpdateResult(movies=len(movies), locations=location_count, movie_infos=stored_infos)
