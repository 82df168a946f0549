"""Tests for the JSON 404 and 500 handlers."""
import pytest
from django.test import Client

from apps.orders import providers


@pytest.mark.parametrize("url", ["/api/v1/nope/", "/api/v1/orders/1/nope/", "/nope"])
def test_unknown_route_returns_json_404(client, url):
    r = client.get(url)
    assert r.status_code == 404
    assert r["Content-Type"] == "application/json"
    assert r.json() == {"success": False, "error": "Route not found"}


def test_unhandled_exception_returns_json_500(monkeypatch):
    def boom():
        raise RuntimeError("wiring broken")

    monkeypatch.setattr(providers, "get_order_service", boom)
    r = Client(raise_request_exception=False).get("/api/v1/orders/1/")
    assert r.status_code == 500
    assert r["Content-Type"] == "application/json"
    assert r.json() == {"success": False, "error": "Internal server error"}
    assert "X-Request-ID" in r.headers
