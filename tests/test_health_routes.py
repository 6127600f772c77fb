# tests/test_health_routes.py

import pytest


@pytest.mark.asyncio
async def test_health_reports_service_and_polling(async_client):
    resp = await async_client.get("/health")

    assert resp.status_code == 200
    body = resp.json()
    assert body["status"] == "ok"
    assert body["environment"] == "test"
    assert body["activations"] == {"polling": 0}
    assert body["service"]["name"] == "PitBox"


@pytest.mark.asyncio
async def test_metrics_endpoint_exposes_collectors(async_client):
    await async_client.get("/health")
    resp = await async_client.get("/metrics")

    assert resp.status_code == 200
    assert resp.headers["content-type"].startswith("text/plain")
    assert "pitbox_http_requests_total" in resp.text
    assert "pitbox_activation_polling_flows" in resp.text
