"""Pydantic schemas for API responses."""

from movielocations.schemas.movie import (
    LocationResponse,
    MovieDetailResponse,
    MovieResponse,
)
from movielocations.schemas.update import UpdateResponse

__all__ = [
    "LocationResponse",
    "MovieDetailResponse",
    "MovieResponse",
    "UpdateResponse",
]
