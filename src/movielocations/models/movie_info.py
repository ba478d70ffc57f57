"""Movie info model caching OMDb lookups."""

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from movielocations.models.base import Base, CreatedAtMixin


class MovieInfo(Base, CreatedAtMixin):
    """
    Opaque JSON payload from the movie-info source, keyed by movie title.

    An empty ``info_json`` records a lookup that found nothing so the title
    is not requested again.
    """

    __tablename__ = "movie_info"

    movie_title: Mapped[str] = mapped_column(String(255), primary_key=True)
    info_json: Mapped[str] = mapped_column(Text, nullable=False, default="")

    def __repr__(self) -> str:
        return f"<MovieInfo(movie_title={self.movie_title!r})>"
