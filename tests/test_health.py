import pytest


@pytest.mark.anyio
async def test_healthz(async_client):
    response = await async_client.get("/healthz")
    assert response.status_code == 200
    data = response.json()
    assert data["ok"] is True


@pytest.mark.anyio
async def test_api_health(async_client):
    response = await async_client.get("/api/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"


@pytest.mark.anyio
async def test_metrics_exposed(async_client):
    await async_client.get("/healthz")
    response = await async_client.get("/metrics")
    assert response.status_code == 200
    assert "http_requests_total" in response.text or "http_request_duration" in response.text


@pytest.mark.anyio
async def test_api_health_reports_store(async_client):
    response = await async_client.get("/api/health")
    data = response.json()
    assert data["store"] == "memory"
    assert "database" not in data
