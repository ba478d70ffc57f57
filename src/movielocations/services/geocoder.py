"""Google Geocoding API client resolving location names to coordinates."""

import logging
from typing import Any

import httpx

from movielocations.config import settings
from movielocations.feed.models import Coordinates

logger = logging.getLogger(__name__)


class GeocodeNotFoundError(Exception):
    """No specific place could be found for a location name."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Address not found: {name!r}")
        self.name = name


def narrow_location_name(name: str) -> str | None:
    """
    Extract a more specific place from a compound location name.

    A parenthesized part wins over a comma:
        "City Hall (Steps of City Hall)" → "Steps of City Hall"
        "Outside the Palace of Fine Arts, Marina District" → "Marina District"
        "Coit Tower" → None

    The result is always shorter than *name*.

    Returns:
        The narrowed name, or None if nothing narrower can be extracted
    """
    left = name.find("(")
    right = name.find(")")
    if 0 <= left < right:
        return name[left + 1 : right].strip()

    comma = name.find(",")
    if comma >= 0:
        return name[comma + 1 :].strip()

    return None


class GeocodeClient:
    """
    Client for the Google Geocoding API.

    Location names are resolved within San Francisco. Names that only match
    the state as a whole are narrowed with ``narrow_location_name`` and
    looked up again.
    """

    BASE_URL = "https://maps.googleapis.com/maps/api/geocode/json"
    CITY_SUFFIX = "San Francisco, CA"
    GENERIC_ADDRESS = "California, USA"

    def __init__(self, api_key: str | None = None) -> None:
        """
        Initialize geocoding client.

        Args:
            api_key: Google Maps API key (uses settings if not provided)
        """
        self.api_key = api_key or settings.maps_api_key
        if not self.api_key:
            logger.warning("Google Maps API key not configured")

    async def resolve(self, name: str) -> Coordinates:
        """
        Resolve a location name to coordinates.

        Args:
            name: Free-text location name, e.g. "City Hall (exterior)"

        Returns:
            Coordinates of the first result

        Raises:
            GeocodeNotFoundError: If no specific place matches the name or
                any narrowed form of it
            httpx.HTTPError: If a request fails
        """
        data = await self._fetch(name)

        results = data.get("results") or []
        if not results:
            raise GeocodeNotFoundError(name)

        best = results[0]
        if data.get("status") != "OK" or best.get("formatted_address") == self.GENERIC_ADDRESS:
            # Error or state-wide match: look for a nested address
            narrowed = narrow_location_name(name)
            if not narrowed:
                raise GeocodeNotFoundError(name)
            logger.debug(f"Narrowing location '{name}' to '{narrowed}'")
            return await self.resolve(narrowed)

        location = best["geometry"]["location"]
        return Coordinates(lat=float(location["lat"]), lng=float(location["lng"]))

    async def _fetch(self, name: str) -> dict[str, Any]:
        """Query the API for a location name within the city."""
        params = {
            "address": f"{name}, {self.CITY_SUFFIX}",
            "key": self.api_key,
        }

        logger.info(f"Fetching coordinates of location '{name}'")
        async with httpx.AsyncClient(timeout=settings.http_timeout) as client:
            response = await client.get(self.BASE_URL, params=params)
            response.raise_for_status()
            return response.json()
