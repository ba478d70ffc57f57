"""Pydantic schemas for feed updates."""

from pydantic import BaseModel


class UpdateResponse(BaseModel):
    """Result of a feed update."""

    status: str
    movies: int
    locations: int
    movie_infos: int
