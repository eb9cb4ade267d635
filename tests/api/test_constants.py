"""Constants API: GET returns the cached payload, POST forces a refresh."""

from unittest.mock import AsyncMock

from httpx import AsyncClient

from app.api.dependencies import get_job_constants_cache
from app.main import app


async def test_get_constants_returns_all_categories(client: AsyncClient) -> None:
    response = await client.get("/api/constants")
    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["timestamp"].endswith("Z")
    data = body["data"]
    assert set(data) == {"jobRoles", "primaryProducts", "jobTypes", "countries"}
    assert data["jobRoles"] == [
        {"value": "solution_architect", "label": "Solution Architect"},
        {"value": "data_engineer", "label": "Data Engineer"},
    ]
    assert data["jobTypes"][0] == {"value": "full-time", "label": "Full-time"}


async def test_get_constants_is_cached_between_requests(client: AsyncClient, source) -> None:
    await client.get("/api/constants")
    await client.get("/api/constants")
    assert source.total_calls() == 4


async def test_post_refreshes_cache(client: AsyncClient, source) -> None:
    await client.get("/api/constants")
    response = await client.post("/api/constants")
    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["message"] == "Cache refreshed successfully"
    assert "timestamp" in body
    assert source.total_calls() == 8


async def test_get_single_category(client: AsyncClient) -> None:
    response = await client.get("/api/constants/countries")
    assert response.status_code == 200
    body = response.json()
    assert body["category"] == "countries"
    assert body["data"] == [
        {"value": "US", "label": "US"},
        {"value": "DE", "label": "DE"},
    ]


async def test_unknown_category_is_422(client: AsyncClient) -> None:
    response = await client.get("/api/constants/salaries")
    assert response.status_code == 422


async def test_get_failure_returns_500_body(client: AsyncClient) -> None:
    broken = AsyncMock()
    broken.get_all = AsyncMock(side_effect=RuntimeError("unexpected"))
    app.dependency_overrides[get_job_constants_cache] = lambda: broken
    response = await client.get("/api/constants")
    assert response.status_code == 500
    assert response.json() == {"success": False, "error": "Failed to fetch constants"}


async def test_refresh_failure_returns_500_body(client: AsyncClient) -> None:
    broken = AsyncMock()
    broken.refresh = AsyncMock(side_effect=RuntimeError("unexpected"))
    app.dependency_overrides[get_job_constants_cache] = lambda: broken
    response = await client.post("/api/constants")
    assert response.status_code == 500
    assert response.json() == {"success": False, "error": "Failed to refresh cache"}
