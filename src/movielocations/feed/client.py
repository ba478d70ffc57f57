"""Loading the film locations feed from a cached file or over HTTP."""

import logging
import time
from pathlib import Path

import httpx

from movielocations.config import settings
from movielocations.feed.aggregator import entries_to_movies
from movielocations.feed.decoder import decode_entries
from movielocations.feed.models import FeedMovie

logger = logging.getLogger(__name__)


def movies_from_bytes(data: bytes) -> list[FeedMovie]:
    """Decode and aggregate a raw feed payload."""
    entries = decode_entries(data)
    logger.info(f"Resolved {len(entries)} entries")
    movies = entries_to_movies(entries)
    logger.info(f"Resolved {len(movies)} movies")
    return movies


def load_from_file(path: str | Path) -> list[FeedMovie]:
    """
    Load movies from a cached copy of the feed.

    Raises:
        OSError: If the file cannot be read
        FeedDecodeError: If its content is not a valid feed
    """
    path = Path(path)
    logger.info(f"Loading feed from file '{path}'")
    return movies_from_bytes(path.read_bytes())


async def fetch_from_url(url: str | None = None) -> list[FeedMovie]:
    """
    Fetch movies from the feed URL.

    Args:
        url: Feed URL (uses settings if not provided)

    Raises:
        httpx.HTTPError: If the request fails or returns an error status
        FeedDecodeError: If the response is not a valid feed
    """
    url = url or settings.feed_url
    logger.info(f"Fetching feed from URL '{url}'")

    start = time.perf_counter()
    async with httpx.AsyncClient(timeout=settings.http_timeout) as client:
        response = await client.get(url)
        response.raise_for_status()
        data = response.content

    elapsed_ms = (time.perf_counter() - start) * 1000
    logger.info(f"Fetched {len(data)} bytes in {elapsed_ms:.0f} ms")
    return movies_from_bytes(data)
