"""Film locations feed: decoding, aggregation and fetching."""

from movielocations.feed.aggregator import entries_to_movies
from movielocations.feed.decoder import FeedDecodeError, decode_entries
from movielocations.feed.models import Coordinates, FeedLocation, FeedMovie, RawEntry

__all__ = [
    "Coordinates",
    "FeedDecodeError",
    "FeedLocation",
    "FeedMovie",
    "RawEntry",
    "decode_entries",
    "entries_to_movies",
]
