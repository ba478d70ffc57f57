"""Bulk persistence of aggregated movies and of the append-only side tables."""

import logging
import time
from collections.abc import Mapping, Sequence

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from movielocations.feed.models import Coordinates, FeedMovie
from movielocations.models import (
    Actor,
    Location,
    LocationCoordinates,
    Movie,
    MovieInfo,
    movies_actors,
)
from movielocations.persistence.bulk_insert import BulkInsert

logger = logging.getLogger(__name__)


class _StopWatch:
    """Milliseconds since creation and since the previous lap."""

    def __init__(self) -> None:
        self._start = self._lap = time.perf_counter()

    def lap(self) -> float:
        now = time.perf_counter()
        elapsed, self._lap = (now - self._lap) * 1000, now
        return elapsed

    def total(self) -> float:
        return (time.perf_counter() - self._start) * 1000


async def clear_movie_tables(db: AsyncSession) -> None:
    """Delete all movies, locations, actors and their relations (children first)."""
    for table in (movies_actors, Actor.__table__, Location.__table__, Movie.__table__):
        logger.info(f"Clearing table '{table.name}'")
        await db.execute(delete(table))


async def movie_title_id_map(db: AsyncSession) -> dict[str, int]:
    """Map movie titles to ids. A duplicated title keeps the last id read."""
    result = await db.execute(select(Movie.title, Movie.id))
    return {title: movie_id for title, movie_id in result.all()}


async def actor_id_map(db: AsyncSession) -> dict[str, int]:
    """Map actor names to ids."""
    result = await db.execute(select(Actor.name, Actor.id))
    return {name: actor_id for name, actor_id in result.all()}


async def insert_movies(db: AsyncSession, movies: Sequence[FeedMovie]) -> None:
    """
    Insert movies with their locations, actors and movie-actor relations.

    Runs inside the caller's transaction. Locations and relations need the ids
    the database assigns to movies and actors, so each parent table is bulk
    inserted first and then read back to resolve the keys:

    1. movies, then title → id
    2. locations with their movie id
    3. distinct actors, then name → id
    4. movie-actor relations, with each actor's position in the movie's credits
    """
    if not movies:
        return

    logger.info(f"Inserting {len(movies)} movies into database")
    sw = _StopWatch()

    movie_rows = BulkInsert(
        Movie.__table__,
        ("title", "writer", "director", "distributor", "production_company", "release_year"),
    )
    for movie in movies:
        movie_rows.add(
            movie.title,
            movie.writer,
            movie.director,
            movie.distributor,
            movie.production_company,
            movie.release_year,
        )
    count = await movie_rows.execute(db)
    logger.info(f"Inserted {count} movies in {sw.lap():.0f} ms")

    movie_ids = await movie_title_id_map(db)

    location_rows = BulkInsert(Location.__table__, ("movie_id", "name", "fun_fact"))
    for movie in movies:
        movie_id = movie_ids[movie.title]
        for location in movie.locations:
            location_rows.add(movie_id, location.name, location.fun_fact)
    count = await location_rows.execute(db)
    logger.info(f"Inserted {count} locations in {sw.lap():.0f} ms")

    # Actors are unique across all movies, not per movie
    actor_rows = BulkInsert(Actor.__table__, ("name",))
    seen: set[str] = set()
    for movie in movies:
        for actor in movie.actors:
            if actor not in seen:
                seen.add(actor)
                actor_rows.add(actor)
    count = await actor_rows.execute(db)
    logger.info(f"Inserted {count} actors in {sw.lap():.0f} ms")

    actor_ids = await actor_id_map(db)

    relation_rows = BulkInsert(movies_actors, ("movie_id", "actor_id", "position"))
    for movie in movies:
        movie_id = movie_ids[movie.title]
        for position, actor in enumerate(movie.actors):
            relation_rows.add(movie_id, actor_ids[actor], position)
    count = await relation_rows.execute(db)
    logger.info(f"Inserted {count} movie-actor relations in {sw.lap():.0f} ms")

    logger.info(f"Updated database in {sw.total():.0f} ms")


async def store_movies(db: AsyncSession, movies: Sequence[FeedMovie]) -> None:
    """
    Replace all stored movies with *movies* in one transaction.

    Coordinates and movie info are left untouched. On any error the
    transaction is rolled back, leaving the previous movies in place, and the
    error is re-raised.
    """
    try:
        await clear_movie_tables(db)
        await insert_movies(db, movies)
        await db.commit()
    except Exception:
        logger.error("Storing movies failed, rolling back", exc_info=True)
        await db.rollback()
        raise


async def store_coordinates(
    db: AsyncSession,
    coords: Mapping[str, Coordinates | None],
) -> int:
    """
    Append coordinates for location names that are not stored yet.

    Names mapped to None (not resolved) are skipped. A concurrent writer
    storing the same name first is logged and rolled back.

    Returns:
        Number of rows inserted
    """
    resolved = {name: c for name, c in coords.items() if c is not None}
    if not resolved:
        return 0

    result = await db.execute(
        select(LocationCoordinates.location_name).where(
            LocationCoordinates.location_name.in_(resolved)
        )
    )
    existing = set(result.scalars().all())

    rows = BulkInsert(LocationCoordinates.__table__, ("location_name", "lat", "lng"))
    for name, c in resolved.items():
        if name not in existing:
            rows.add(name, c.lat, c.lng)

    try:
        count = await rows.execute(db)
        await db.commit()
    except IntegrityError as e:
        logger.warning(f"Integrity error storing coordinates: {e}")
        await db.rollback()
        return 0

    logger.info(f"Stored coordinates for {count} locations")
    return count


async def store_movie_infos(db: AsyncSession, infos: Mapping[str, str]) -> int:
    """
    Append movie-info payloads for titles that are not stored yet.

    Returns:
        Number of rows inserted
    """
    if not infos:
        return 0

    result = await db.execute(
        select(MovieInfo.movie_title).where(MovieInfo.movie_title.in_(infos))
    )
    existing = set(result.scalars().all())

    rows = BulkInsert(MovieInfo.__table__, ("movie_title", "info_json"))
    for title, info_json in infos.items():
        if title not in existing:
            rows.add(title, info_json)

    sw = _StopWatch()
    try:
        count = await rows.execute(db)
        await db.commit()
    except IntegrityError as e:
        logger.warning(f"Integrity error storing movie info: {e}")
        await db.rollback()
        return 0

    logger.info(f"Inserted {count} movie infos in {sw.total():.0f} ms")
    return count
