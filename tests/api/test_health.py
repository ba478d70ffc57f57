"""Tests for the health check endpoint."""

from unittest.mock import AsyncMock

from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from sqlalchemy.exc import OperationalError

from movielocations.database import get_db


def make_db(session_factory):
    async def _override():
        async with session_factory() as session:
            yield session

    return _override


async def test_health_returns_ok(test_app: FastAPI, session_factory) -> None:
    test_app.dependency_overrides[get_db] = make_db(session_factory)
    try:
        async with AsyncClient(transport=ASGITransport(app=test_app), base_url="http://test") as client:
            response = await client.get("/health")
    finally:
        test_app.dependency_overrides.clear()

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


async def test_health_fails_when_database_is_down(test_app: FastAPI) -> None:
    db = AsyncMock()
    db.execute = AsyncMock(side_effect=OperationalError("SELECT 1", {}, Exception("connection refused")))

    async def _override():
        yield db

    test_app.dependency_overrides[get_db] = _override
    try:
        async with AsyncClient(transport=ASGITransport(app=test_app), base_url="http://test") as client:
            response = await client.get("/health")
    finally:
        test_app.dependency_overrides.clear()

    assert response.status_code == 503
    assert response.json()["detail"] == "Database unavailable"
