"""Health check endpoint."""

import logging

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from movielocations.database import get_db

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("/health", tags=["health"])
async def health_check(db: AsyncSession = Depends(get_db)) -> dict[str, str]:
    """
    Health check endpoint.

    Runs a trivial query so an unreachable database fails the check.

    Returns:
        Simple status message indicating the API and database are up

    Raises:
        HTTPException: 503 if the database cannot be queried
    """
    try:
        await db.execute(select(1))
    except (SQLAlchemyError, OSError) as e:
        logger.error(f"Health check database query failed: {e}")
        raise HTTPException(status_code=503, detail="Database unavailable")
    return {"status": "ok"}
