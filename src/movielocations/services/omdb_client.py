"""OMDb API client for fetching movie info payloads."""

import json
import logging

import httpx

from movielocations.config import settings
from movielocations.utils.text import sanitize_movie_title

logger = logging.getLogger(__name__)


class OMDbClient:
    """
    Client for the Open Movie Database (OMDb) API.

    Payloads are returned as raw JSON text; callers store them without
    interpreting the schema.
    """

    BASE_URL = "http://www.omdbapi.com/"

    def __init__(self, api_key: str | None = None) -> None:
        """
        Initialize OMDb client.

        Args:
            api_key: OMDb API key (uses settings if not provided)
        """
        self.api_key = api_key or settings.omdb_api_key

    async def fetch_movie_info(self, title: str) -> str | None:
        """
        Fetch the info payload of a movie.

        Args:
            title: Movie title as stored; episode suffixes are removed first

        Returns:
            JSON text of the response, "" if OMDb has no match for the
            title, or None if the request failed
        """
        sanitized = sanitize_movie_title(title)
        params = {
            "t": sanitized,
            "y": "",
            "plot": "short",
            "r": "json",
        }
        if self.api_key:
            params["apikey"] = self.api_key

        logger.info(f"Fetching info for movie '{title}' ('{sanitized}')")
        try:
            async with httpx.AsyncClient(timeout=settings.http_timeout) as client:
                response = await client.get(self.BASE_URL, params=params)
                response.raise_for_status()
                payload = response.text

        except Exception as e:
            logger.error(f"OMDb request error for '{title}': {e}")
            return None

        if not self.is_match(payload):
            logger.info(f"No OMDb match for: {title}")
            return ""

        return payload

    def is_match(self, payload: str) -> bool:
        """Check whether a payload describes a found movie (``"Response": "True"``)."""
        try:
            data = json.loads(payload)
        except ValueError:
            return False
        return isinstance(data, dict) and data.get("Response") == "True"
