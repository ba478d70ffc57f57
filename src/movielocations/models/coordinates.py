"""Geocoded coordinates keyed by location name."""

from sqlalchemy import Float, String
from sqlalchemy.orm import Mapped, mapped_column

from movielocations.models.base import Base, CreatedAtMixin


class LocationCoordinates(Base, CreatedAtMixin):
    """
    Coordinates of a location name.

    Independent of any movie: every location with the same name shares the
    row. The table is append-only and survives feed updates.
    """

    __tablename__ = "coordinates"

    location_name: Mapped[str] = mapped_column(String(255), primary_key=True)
    lat: Mapped[float] = mapped_column(Float, nullable=False)
    lng: Mapped[float] = mapped_column(Float, nullable=False)

    def __repr__(self) -> str:
        return f"<LocationCoordinates({self.location_name!r}, lat={self.lat}, lng={self.lng})>"
