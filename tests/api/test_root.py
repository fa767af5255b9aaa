"""
Tests for the service status endpoint.
"""

import pytest
from httpx import AsyncClient

pytestmark = pytest.mark.asyncio


async def test_root_returns_status(client: AsyncClient) -> None:
    response = await client.get("/")

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert "message" in data


async def test_openapi_lists_resources(client: AsyncClient) -> None:
    response = await client.get("/openapi.json")

    assert response.status_code == 200
    paths = response.json()["paths"]
    assert {"/", "/categories", "/sales"} <= set(paths)
    assert "/metrics" not in paths
