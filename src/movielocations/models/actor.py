"""Actor model."""

from typing import TYPE_CHECKING

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from movielocations.models.base import Base
from movielocations.models.movie_actor import movies_actors

if TYPE_CHECKING:
    from movielocations.models.movie import Movie


class Actor(Base):
    """Actor, unique by name across all movies of an ingestion."""

    __tablename__ = "actors"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)

    # Relationships
    movies: Mapped[list["Movie"]] = relationship(
        secondary=movies_actors,
        back_populates="actors",
    )

    def __repr__(self) -> str:
        return f"<Actor(id={self.id}, name={self.name!r})>"
