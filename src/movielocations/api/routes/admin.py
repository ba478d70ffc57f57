"""Admin API endpoints for manual operations."""

import logging

from fastapi import APIRouter, Depends

from movielocations.api.dependencies import get_initializer
from movielocations.persistence.initializer import DatabaseInitializer
from movielocations.schemas import UpdateResponse
from movielocations.tasks.update_job import run_update

logger = logging.getLogger(__name__)
router = APIRouter()


@router.post("/admin/update", response_model=UpdateResponse)
async def trigger_update(
    initializer: DatabaseInitializer = Depends(get_initializer),
) -> UpdateResponse:
    """
    Re-ingest the feed from its URL and fetch info for new movies.

    Waits for any running initialization or update to finish first. Errors
    while fetching or storing the feed fail the request; the previously
    stored movies stay in place.
    """
    result = await run_update(initializer)
    return UpdateResponse(
        status="ok",
        movies=result.movies,
        locations=result.locations,
        movie_infos=result.movie_infos,
    )
