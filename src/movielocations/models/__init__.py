"""SQLAlchemy ORM models."""

from movielocations.models.actor import Actor
from movielocations.models.base import Base
from movielocations.models.coordinates import LocationCoordinates
from movielocations.models.location import Location
from movielocations.models.movie import Movie
from movielocations.models.movie_actor import movies_actors
from movielocations.models.movie_info import MovieInfo

__all__ = [
    "Actor",
    "Base",
    "Location",
    "LocationCoordinates",
    "Movie",
    "MovieInfo",
    "movies_actors",
]
