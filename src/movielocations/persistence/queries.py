"""Read access to stored movies, coordinates and movie info."""

import logging
from collections.abc import Iterable

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from movielocations.feed.models import Coordinates
from movielocations.models import LocationCoordinates, Movie, MovieInfo

logger = logging.getLogger(__name__)


async def load_movies(db: AsyncSession) -> list[Movie]:
    """Load all movies with locations and actors, sorted by title."""
    result = await db.execute(
        select(Movie)
        .options(selectinload(Movie.locations), selectinload(Movie.actors))
        .order_by(Movie.title, Movie.id)
    )
    movies = list(result.scalars().all())
    logger.debug(f"Loaded {len(movies)} movies")
    return movies


async def load_movie(db: AsyncSession, movie_id: int) -> Movie | None:
    """Load one movie with locations and actors, or None if the id is unknown."""
    result = await db.execute(
        select(Movie)
        .options(selectinload(Movie.locations), selectinload(Movie.actors))
        .where(Movie.id == movie_id)
    )
    return result.scalar_one_or_none()


async def load_coordinates(db: AsyncSession, names: Iterable[str]) -> dict[str, Coordinates]:
    """Load stored coordinates for the given location names."""
    names = set(names)
    if not names:
        return {}

    result = await db.execute(
        select(LocationCoordinates).where(LocationCoordinates.location_name.in_(names))
    )
    return {
        row.location_name: Coordinates(lat=row.lat, lng=row.lng)
        for row in result.scalars().all()
    }


async def load_movie_info_json(db: AsyncSession, title: str) -> str | None:
    """Load the stored movie-info payload for a title, or None if never fetched."""
    result = await db.execute(
        select(MovieInfo.info_json).where(MovieInfo.movie_title == title)
    )
    return result.scalar_one_or_none()


async def load_movie_info_jsons(db: AsyncSession) -> dict[str, str]:
    """Load all stored movie-info payloads keyed by title."""
    result = await db.execute(select(MovieInfo.movie_title, MovieInfo.info_json))
    infos = {title: info_json for title, info_json in result.all()}
    logger.info(f"Loaded info for {len(infos)} movies")
    return infos
