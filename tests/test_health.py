"""
Health endpoint tests using pytest-asyncio and httpx.AsyncClient.
"""

import pytest

from app.services.health_service import iso_duration


@pytest.mark.asyncio
async def test_health_endpoint(test_client):
    """Test the health check endpoint returns expected structure."""
    response = await test_client.get("/api/v1/health")

    assert response.status_code == 200
    data = response.json()

    assert data["status"] == "ok"
    assert data["uptime"].startswith("PT")
    assert data["checks"] == {"database": "ok"}


@pytest.mark.asyncio
async def test_root_health_endpoint(test_client):
    response = await test_client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] in ["ok", "degraded"]


def test_iso_duration():
    assert iso_duration(0) == "PT0S"
    assert iso_duration(59) == "PT59S"
    assert iso_duration(3600) == "PT1H"
    assert iso_duration(3723) == "PT1H2M3S"
