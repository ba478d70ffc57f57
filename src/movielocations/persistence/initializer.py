"""First-time database initialization guarded by an explicit lock."""

import asyncio
import logging
from pathlib import Path

from sqlalchemy import inspect
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from movielocations.feed.client import load_from_file
from movielocations.models import Base, Movie
from movielocations.persistence.writer import store_movies

logger = logging.getLogger(__name__)


async def create_tables(db: AsyncSession) -> None:
    """Create all tables that do not exist yet, in the session's transaction."""
    conn = await db.connection()
    await conn.run_sync(Base.metadata.create_all)


async def has_tables(db: AsyncSession) -> bool:
    """Check whether the movies table exists."""
    conn = await db.connection()
    return await conn.run_sync(lambda sync_conn: inspect(sync_conn).has_table(Movie.__tablename__))


class DatabaseInitializer:
    """
    Creates and fills the database once per process.

    The lock also serializes feed updates (see ``tasks.update_job``) so an
    update cannot clear the tables while they are being initialized, or
    while another update is running.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        """
        Initialize the guard.

        Args:
            session_factory: Factory for the sessions used to initialize
        """
        self.session_factory = session_factory
        self.lock = asyncio.Lock()
        self._initialized = False

    @property
    def initialized(self) -> bool:
        """Whether the database is known to be initialized."""
        return self._initialized

    async def ensure_initialized(self, feed_file: str | Path) -> bool:
        """
        Create the tables and load the cached feed unless that already happened.

        The feed file is only read when the movies table is missing. It is
        decoded before any transaction is opened; creating the tables and
        storing the movies then commit together.

        Args:
            feed_file: Path of the cached feed

        Returns:
            True if this call initialized the database, False if it already was

        Raises:
            OSError: If the feed file cannot be read
            FeedDecodeError: If the feed file is not a valid feed
        """
        async with self.lock:
            if self._initialized:
                return False

            async with self.session_factory() as db:
                exists = await has_tables(db)
                # Close the read transaction before the (slow) file load
                await db.rollback()

                if exists:
                    logger.info("Database is already initialized")
                    self._initialized = True
                    return False

                logger.info("Initializing database from cached file...")
                movies = load_from_file(feed_file)

                await create_tables(db)
                await store_movies(db, movies)

            self._initialized = True
            logger.info(f"Database initialized with {len(movies)} movies")
            return True
