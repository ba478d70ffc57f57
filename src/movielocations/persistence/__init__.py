"""Relational persistence: bulk writes, reads and initialization."""

from movielocations.persistence.bulk_insert import BulkInsert
from movielocations.persistence.initializer import DatabaseInitializer, create_tables
from movielocations.persistence.writer import (
    store_coordinates,
    store_movie_infos,
    store_movies,
)

__all__ = [
    "BulkInsert",
    "DatabaseInitializer",
    "create_tables",
    "store_coordinates",
    "store_movie_infos",
    "store_movies",
]
