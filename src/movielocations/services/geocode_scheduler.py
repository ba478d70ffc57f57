"""Concurrent geocoding of many location names with staggered requests."""

import asyncio
import logging
from collections.abc import Callable, Iterable
from typing import Protocol

from movielocations.config import settings
from movielocations.feed.models import Coordinates

logger = logging.getLogger(__name__)


class Resolver(Protocol):
    async def resolve(self, name: str) -> Coordinates: ...


def staggered_delay(index: int) -> float:
    """Start delay in seconds for the *index*-th request."""
    return index * settings.geocode_delay_ms / 1000


async def resolve_coordinates(
    names: Iterable[str],
    geocoder: Resolver,
    delay: Callable[[int], float] | None = None,
    coords: dict[str, Coordinates] | None = None,
) -> dict[str, Coordinates]:
    """
    Geocode all names concurrently and collect the results.

    Every distinct name gets its own task; all tasks start at once and the
    i-th one first sleeps ``delay(i)`` seconds so requests are spread out
    instead of hitting the API's rate limit in one burst. Names that fail to
    resolve are logged and left out of the result. Returns once every task
    has finished.

    Args:
        names: Location names to resolve (duplicates are resolved once)
        geocoder: Object whose ``resolve`` coroutine returns coordinates
        delay: Maps a task index to its start delay in seconds
            (defaults to ``settings.geocode_delay_ms`` per index)
        coords: Map to add the results to (a new one if not provided)

    Returns:
        The map of resolved names to coordinates
    """
    delay = delay or staggered_delay
    if coords is None:
        coords = {}
    lock = asyncio.Lock()

    async def resolve_one(index: int, name: str) -> None:
        """Resolve and record a single name; never raises."""
        await asyncio.sleep(delay(index))
        try:
            result = await geocoder.resolve(name)
        except Exception as e:
            logger.info(f"Coordinates could not be fetched for location '{name}': {e}")
            return

        logger.info(f"Fetched coordinates ({result.lat}, {result.lng}) for location '{name}'")
        async with lock:
            coords[name] = result

    unique_names = list(dict.fromkeys(names))
    if unique_names:
        await asyncio.gather(*[resolve_one(i, n) for i, n in enumerate(unique_names)])

    return coords
