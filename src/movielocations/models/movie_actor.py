"""Association table between movies and actors."""

from sqlalchemy import Column, ForeignKey, Integer, Table

from movielocations.models.base import Base

movies_actors = Table(
    "movies_actors",
    Base.metadata,
    Column("movie_id", ForeignKey("movies.id", ondelete="CASCADE"), primary_key=True),
    Column("actor_id", ForeignKey("actors.id", ondelete="CASCADE"), primary_key=True),
    # Index of the actor in the movie's credits (first-seen order in the feed)
    Column("position", Integer, nullable=False, default=0),
)
