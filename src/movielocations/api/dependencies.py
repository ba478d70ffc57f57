"""FastAPI dependencies shared by the routes."""

from fastapi import Request

from movielocations.persistence.initializer import DatabaseInitializer
from movielocations.services.geocoder import GeocodeClient


def get_initializer(request: Request) -> DatabaseInitializer:
    """The database initializer created in the application lifespan."""
    return request.app.state.initializer


def get_geocoder() -> GeocodeClient:
    """Geocoding client using the configured API key."""
    return GeocodeClient()
