"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from movielocations.api.routes import admin, health, movies
from movielocations.config import settings
from movielocations.database import AsyncSessionLocal
from movielocations.persistence.initializer import DatabaseInitializer

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup: fill the database from the cached feed on first run
    initializer = DatabaseInitializer(AsyncSessionLocal)
    app.state.initializer = initializer
    try:
        await initializer.ensure_initialized(settings.feed_file)
    except Exception as e:
        # Serve anyway; POST /api/admin/update can still load the feed
        logger.error(f"Database initialization failed: {e}", exc_info=True)

    yield


# Create FastAPI app
app = FastAPI(
    title="Movie Locations API",
    description="Shoot locations of movies filmed in San Francisco",
    version="0.1.0",
    lifespan=lifespan,
)

# Include routers
app.include_router(health.router)
app.include_router(movies.router, prefix="/api", tags=["movies"])
app.include_router(admin.router, prefix="/api", tags=["admin"])
