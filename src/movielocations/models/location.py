"""Location model for the places a movie was shot at."""

from typing import TYPE_CHECKING

from sqlalchemy import ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from movielocations.models.base import Base

if TYPE_CHECKING:
    from movielocations.models.movie import Movie


class Location(Base):
    """
    Shoot location of a movie.

    The same place name may appear several times for one movie (one row per
    scene in the feed). Coordinates live in the name-keyed coordinates table.
    """

    __tablename__ = "locations"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    movie_id: Mapped[int] = mapped_column(
        ForeignKey("movies.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    fun_fact: Mapped[str] = mapped_column(Text, nullable=False, default="")

    # Relationships
    movie: Mapped["Movie"] = relationship(back_populates="locations")

    def __repr__(self) -> str:
        return f"<Location(movie_id={self.movie_id}, name={self.name!r})>"
