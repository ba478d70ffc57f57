"""Pydantic schemas for movie data."""

from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator

from movielocations.feed.models import Coordinates


class LocationResponse(BaseModel):
    """Location response schema."""

    model_config = ConfigDict(from_attributes=True)

    name: str
    fun_fact: str = ""

    # Only set on the movie detail endpoint, None when geocoding failed
    coordinates: Coordinates | None = None


class MovieResponse(BaseModel):
    """Movie response schema."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    director: str = ""
    writer: str = ""
    distributor: str = ""
    production_company: str = ""
    release_year: int = 0
    actors: list[str] = []
    locations: list[LocationResponse] = []

    @field_validator("actors", mode="before")
    @classmethod
    def _actor_names(cls, value: Any) -> Any:
        # ORM movies carry Actor objects
        return [getattr(actor, "name", actor) for actor in value]


class MovieDetailResponse(MovieResponse):
    """Movie response with the parsed movie-info payload, if one is stored."""

    info: dict[str, Any] | None = None
