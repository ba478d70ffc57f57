"""Coordinate enrichment for the locations of a movie."""

import logging
from collections.abc import Callable, Sequence
from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from movielocations.feed.models import Coordinates
from movielocations.persistence.queries import load_coordinates
from movielocations.persistence.writer import store_coordinates
from movielocations.services.geocode_scheduler import Resolver, resolve_coordinates

logger = logging.getLogger(__name__)


async def attach_coordinates(
    db: AsyncSession,
    locations: Sequence[Any],
    geocoder: Resolver,
    delay: Callable[[int], float] | None = None,
) -> dict[str, Coordinates]:
    """
    Set ``coordinates`` on each location, geocoding names not stored yet.

    Stored coordinates are used as they are. Missing names are geocoded
    concurrently and the ones that resolve are stored for next time.
    Locations whose name cannot be resolved get ``coordinates = None``.

    Args:
        db: Database session
        locations: Objects with a ``name`` attribute (feed locations or
            location responses); ``coordinates`` is set on each of them
        geocoder: Resolver used for names without stored coordinates
        delay: Optional start delay per geocoding task, in seconds

    Returns:
        Coordinates of all resolved location names
    """
    names = {location.name for location in locations}
    coords = await load_coordinates(db, names)

    missing = [name for name in sorted(names) if name not in coords]
    if missing:
        logger.info(f"Geocoding {len(missing)} of {len(names)} locations")
        fetched = await resolve_coordinates(missing, geocoder, delay=delay)
        await store_coordinates(db, fetched)
        coords.update(fetched)

    for location in locations:
        location.coordinates = coords.get(location.name)

    return coords
