"""API tests for status changes, including the create -> pay scenario."""
import pytest

from apps.orders.models import OrderModel

CREATE_URL = "/api/v1/orders/"
STATUS_URL = "/api/v1/orders/{oid}/status/"


@pytest.mark.django_db
def test_create_then_mark_paid_keeps_code_and_price(client):
    created = client.post(
        CREATE_URL, data={"product_id": 1, "product_name": "Produk A"}, content_type="application/json"
    ).json()["data"]

    r = client.patch(STATUS_URL.format(oid=created["id"]), data={"status": "paid"}, content_type="application/json")
    assert r.status_code == 200
    body = r.json()
    assert body["message"] == "Order status updated successfully"
    assert body["data"]["status"] == "paid"
    assert body["data"]["unique_code"] == created["unique_code"]
    assert body["data"]["price"] == created["price"]


@pytest.mark.django_db
def test_any_status_may_follow_any_other(client):
    o = OrderModel.objects.create(product_id=1, product_name="A", price=299000, unique_code="01", status="completed")
    for st in ("pending", "cancelled", "paid", "completed"):
        r = client.patch(STATUS_URL.format(oid=o.id), data={"status": st}, content_type="application/json")
        assert r.status_code == 200
        assert r.json()["data"]["status"] == st


@pytest.mark.django_db
def test_update_missing_order_returns_404_and_changes_nothing(client):
    o = OrderModel.objects.create(product_id=1, product_name="A", price=299000, unique_code="01")
    r = client.patch(STATUS_URL.format(oid=o.id + 1), data={"status": "paid"}, content_type="application/json")
    assert r.status_code == 404
    assert r.json()["error"] == "Order not found"
    assert list(OrderModel.objects.values_list("status", flat=True)) == ["pending"]


@pytest.mark.django_db
@pytest.mark.parametrize("payload", [{}, {"status": "shipped"}, {"status": "PAID"}])
def test_update_with_invalid_status_returns_400(client, payload):
    o = OrderModel.objects.create(product_id=1, product_name="A", price=299000, unique_code="01")
    r = client.patch(STATUS_URL.format(oid=o.id), data=payload, content_type="application/json")
    assert r.status_code == 400
    assert r.json()["error"] == "Invalid status. Must be one of: pending, paid, cancelled, completed"
