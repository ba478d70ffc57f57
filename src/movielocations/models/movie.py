"""Movie model for films shot on location."""

from typing import TYPE_CHECKING

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from movielocations.models.base import Base
from movielocations.models.movie_actor import movies_actors

if TYPE_CHECKING:
    from movielocations.models.actor import Actor
    from movielocations.models.location import Location


class Movie(Base):
    """
    Movie model.

    Rows are cleared and re-inserted in bulk on every ingestion, so ids are
    only stable between two updates of the feed.
    """

    __tablename__ = "movies"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    writer: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    director: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    distributor: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    production_company: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    release_year: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    # Relationships
    locations: Mapped[list["Location"]] = relationship(
        back_populates="movie",
        order_by="Location.id",
    )
    actors: Mapped[list["Actor"]] = relationship(
        secondary=movies_actors,
        back_populates="movies",
        order_by=movies_actors.c.position,
    )

    def __repr__(self) -> str:
        return f"<Movie(id={self.id}, title={self.title!r}, release_year={self.release_year})>"
