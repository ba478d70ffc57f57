"""Data models for the film locations feed."""

from dataclasses import dataclass, field

from pydantic import BaseModel, field_validator

from movielocations.utils.text import normalize_field


class RawEntry(BaseModel):
    """
    One flat record of the feed.

    Each record describes a single location of a movie and repeats the
    movie-level fields. Missing keys, blank strings and "N/A" all decode to "".
    """

    title: str = ""
    release_year: str = ""
    locations: str = ""
    fun_facts: str = ""
    production_company: str = ""
    distributor: str = ""
    director: str = ""
    writer: str = ""
    actor_1: str = ""
    actor_2: str = ""
    actor_3: str = ""

    @field_validator("*", mode="before")
    @classmethod
    def _normalize(cls, value: object) -> object:
        if value is None:
            return ""
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            value = str(value)
        if isinstance(value, str):
            return normalize_field(value)
        return value

    @property
    def actors(self) -> list[str]:
        """Non-empty actor slots in slot order."""
        return [a for a in (self.actor_1, self.actor_2, self.actor_3) if a]


@dataclass
class Coordinates:
    """Latitude/longitude pair of a geocoded location name."""

    lat: float
    lng: float


@dataclass
class FeedLocation:
    """A location of a movie, optionally enriched with coordinates."""

    name: str
    fun_fact: str = ""
    coordinates: Coordinates | None = None


@dataclass
class FeedMovie:
    """
    A movie aggregated from one or more feed entries.

    Only exists with at least one location; actor names are unique and kept
    in the order they were first seen.
    """

    title: str
    director: str = ""
    writer: str = ""
    distributor: str = ""
    production_company: str = ""
    release_year: int = 0
    actors: list[str] = field(default_factory=list)
    locations: list[FeedLocation] = field(default_factory=list)

    def add_actor(self, name: str) -> None:
        """Append an actor unless the name is empty or already listed."""
        if name and name not in self.actors:
            self.actors.append(name)
