"""Decoding of raw feed bytes into normalized entries."""

import logging

from pydantic import TypeAdapter, ValidationError

from movielocations.feed.models import RawEntry

logger = logging.getLogger(__name__)

_ENTRIES = TypeAdapter(list[RawEntry])


class FeedDecodeError(ValueError):
    """The feed is not UTF-8 encoded JSON holding an array of flat records."""


def decode_entries(data: bytes | str) -> list[RawEntry]:
    """
    Decode a feed payload into entries.

    Args:
        data: JSON array of records, as bytes (UTF-8) or text

    Returns:
        Entries in feed order, every field normalized

    Raises:
        FeedDecodeError: If the payload is not valid UTF-8, not valid JSON,
            or not an array of objects with scalar fields
    """
    if isinstance(data, bytes):
        try:
            data = data.decode("utf-8")
        except UnicodeDecodeError as e:
            raise FeedDecodeError(f"Feed is not valid UTF-8: {e}") from e

    try:
        entries = _ENTRIES.validate_json(data)
    except ValidationError as e:
        raise FeedDecodeError(f"Invalid feed ({e.error_count()} errors): {e}") from e

    logger.debug(f"Decoded {len(entries)} feed entries")
    return entries
