"""Integration tests for metrics endpoint."""

from __future__ import annotations


def test_metrics_endpoint_available(client, canonical_batch):
    client.post("/normalize", json={"text": canonical_batch})
    response = client.get("/metrics")
    assert response.status_code == 200
    body = response.content.decode()
    assert "foodlog_http_requests_total" in body
    assert 'foodlog_normalizations_total{mode="strict",result="ok"}' in body
