"""End-to-end test for the health endpoint."""

import pytest

from tests.harness import create_api_fixtures

api_container, api_client = create_api_fixtures()


@pytest.mark.asyncio
async def test_health(api_client):
    response = await api_client.get("/health")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "healthy"
    assert "environment" in body
