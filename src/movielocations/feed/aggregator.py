"""Aggregation of flat feed entries into movies with locations."""

import logging
from collections.abc import Iterable

from movielocations.feed.models import FeedLocation, FeedMovie, RawEntry
from movielocations.utils.text import parse_release_year

logger = logging.getLogger(__name__)


def entry_to_location(entry: RawEntry) -> FeedLocation:
    """Build the location an entry describes; the name may be empty."""
    return FeedLocation(name=entry.locations, fun_fact=entry.fun_facts)


def entry_to_movie(entry: RawEntry) -> FeedMovie:
    """Build a movie from the movie-level fields of an entry, without locations."""
    movie = FeedMovie(
        title=entry.title,
        director=entry.director,
        writer=entry.writer,
        distributor=entry.distributor,
        production_company=entry.production_company,
        release_year=parse_release_year(entry.release_year),
    )
    for actor in entry.actors:
        movie.add_actor(actor)
    return movie


def entries_to_movies(entries: Iterable[RawEntry]) -> list[FeedMovie]:
    """
    Group entries by title into movies.

    Entries without a location are dropped entirely. The first entry with a
    location for a title provides the movie-level fields; later ones only add
    their location and any actors not yet listed.

    Args:
        entries: Normalized feed entries in feed order

    Returns:
        Movies in no particular order
    """
    movies: dict[str, FeedMovie] = {}
    skipped = 0

    for entry in entries:
        location = entry_to_location(entry)
        if not location.name:
            skipped += 1
            continue

        movie = movies.get(entry.title)
        if movie is None:
            movie = entry_to_movie(entry)
            movies[entry.title] = movie
        else:
            for actor in entry.actors:
                movie.add_actor(actor)

        movie.locations.append(location)

    if skipped:
        logger.debug(f"Skipped {skipped} entries without a location")

    return list(movies.values())
