"""Movies API endpoints."""

import json
import logging
from typing import Any

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from movielocations.api.dependencies import get_geocoder
from movielocations.database import get_db
from movielocations.persistence.queries import load_movie, load_movie_info_json, load_movies
from movielocations.schemas import MovieDetailResponse, MovieResponse
from movielocations.services.coordinates import attach_coordinates
from movielocations.services.geocoder import GeocodeClient

logger = logging.getLogger(__name__)
router = APIRouter()


def parse_movie_info(info_json: str | None) -> dict[str, Any] | None:
    """Parse a stored movie-info payload; None when absent, empty or invalid."""
    if not info_json:
        return None
    try:
        info = json.loads(info_json)
    except ValueError as e:
        logger.error(f"Invalid movie info JSON: {e}")
        return None
    return info if isinstance(info, dict) else None


@router.get("/movies", response_model=list[MovieResponse])
async def list_movies(db: AsyncSession = Depends(get_db)) -> list[MovieResponse]:
    """List all movies with their locations, sorted by title."""
    movies = await load_movies(db)
    return [MovieResponse.model_validate(m) for m in movies]


@router.get("/movies/{movie_id}", response_model=MovieDetailResponse)
async def get_movie(
    movie_id: int,
    db: AsyncSession = Depends(get_db),
    geocoder: GeocodeClient = Depends(get_geocoder),
) -> MovieDetailResponse:
    """
    Get a movie with coordinates for its locations.

    Locations without stored coordinates are geocoded on the fly and the
    results stored. A location that cannot be geocoded is returned without
    coordinates.
    """
    movie = await load_movie(db, movie_id)
    if movie is None:
        raise HTTPException(status_code=404, detail=f"Movie with ID {movie_id} not found")

    logger.info(f"Rendering movie with ID {movie_id}")
    response = MovieDetailResponse.model_validate(movie)
    response.info = parse_movie_info(await load_movie_info_json(db, movie.title))

    await attach_coordinates(db, response.locations, geocoder)
    return response
