import pytest
from django.db import DatabaseError

from apps.orders.models import OrderModel


@pytest.mark.django_db
def test_health_reports_db_and_code_pool(client):
    OrderModel.objects.create(product_id=1, product_name="A", price=299000, unique_code="01")
    r = client.get("/health/")
    assert r.status_code == 200
    body = r.json()
    assert body["ok"] is True
    assert body["components"]["db"] == {"ok": True}
    assert body["components"]["code_pool"] == {"ok": True, "available": 9, "total": 10}


@pytest.mark.django_db
def test_health_returns_503_when_db_is_down(client, monkeypatch):
    class BrokenCursor:
        def __enter__(self):
            raise DatabaseError("down")

        def __exit__(self, *exc):
            return False

    monkeypatch.setattr("apps.monitoring.api.connection.cursor", lambda: BrokenCursor())
    r = client.get("/health/")
    assert r.status_code == 503
    assert r.json()["components"]["db"] == {"ok": False}
    assert r.json()["components"]["code_pool"] == {"ok": False}
