import pytest

from apps.orders.models import OrderModel

DETAIL_URL = "/api/v1/orders/{oid}/"
LIST_URL = "/api/v1/orders/"
BY_STATUS_URL = "/api/v1/orders/status/{status}/"
BY_CODE_URL = "/api/v1/orders/code/{code}/"


def seed(code, status="pending", product_id=1, name="Produk A"):
    return OrderModel.objects.create(
        product_id=product_id, product_name=name, price=299000, unique_code=code, status=status
    )


@pytest.mark.django_db
def test_get_order_by_id_returns_200_and_payload(client):
    o = seed("06", status="paid")
    r = client.get(DETAIL_URL.format(oid=o.id))
    assert r.status_code == 200
    body = r.json()
    assert body["success"] is True
    data = body["data"]
    assert data["id"] == o.id
    assert data["status"] == "paid"
    assert data["price"] == 299000
    assert data["unique_code"] == "06"
    assert {"created_at", "updated_at"} <= set(data)


@pytest.mark.django_db
def test_get_order_twice_returns_identical_data(client):
    o = seed("02")
    r1 = client.get(DETAIL_URL.format(oid=o.id))
    r2 = client.get(DETAIL_URL.format(oid=o.id))
    assert r1.json() == r2.json()


@pytest.mark.django_db
def test_get_order_not_found_returns_404(client):
    r = client.get(DETAIL_URL.format(oid=99999))
    assert r.status_code == 404
    assert r.json() == {"success": False, "error": "Order not found"}


@pytest.mark.django_db
def test_list_orders_returns_page_newest_first(client):
    ids = [seed(f"{n:02d}").id for n in range(1, 8)]
    r = client.get(LIST_URL, {"page": 1, "limit": 5})
    assert r.status_code == 200
    body = r.json()
    assert body["success"] is True
    assert body["total"] == 7 and body["page"] == 1 and body["limit"] == 5
    assert len(body["data"]) == 5
    assert [o["id"] for o in body["data"]] == list(reversed(ids))[:5]

    r2 = client.get(LIST_URL, {"page": 2, "limit": 5})
    assert [o["id"] for o in r2.json()["data"]] == list(reversed(ids))[5:]


@pytest.mark.django_db
def test_list_orders_defaults(client):
    seed("01")
    body = client.get(LIST_URL).json()
    assert body["page"] == 1 and body["limit"] == 10 and body["total"] == 1


@pytest.mark.django_db
@pytest.mark.parametrize("query", [{"page": 0}, {"limit": 0}, {"limit": 101}, {"page": "abc"}])
def test_list_orders_rejects_bad_pagination(client, query):
    r = client.get(LIST_URL, query)
    assert r.status_code == 400
    assert r.json()["success"] is False


@pytest.mark.django_db
def test_list_by_status(client):
    seed("01", status="paid")
    seed("02")
    seed("03", status="paid")
    r = client.get(BY_STATUS_URL.format(status="paid"), {"limit": 1})
    assert r.status_code == 200
    body = r.json()
    assert body["total"] == 2
    assert len(body["data"]) == 1
    assert body["data"][0]["unique_code"] == "03"


@pytest.mark.django_db
def test_list_by_unknown_status_returns_400(client):
    r = client.get(BY_STATUS_URL.format(status="shipped"))
    assert r.status_code == 400
    assert r.json()["error"].startswith("Invalid status")


@pytest.mark.django_db
def test_get_by_unique_code(client):
    o = seed("08")
    r = client.get(BY_CODE_URL.format(code="08"))
    assert r.status_code == 200
    assert r.json()["data"]["id"] == o.id

    assert client.get(BY_CODE_URL.format(code="09")).status_code == 404


@pytest.mark.django_db
@pytest.mark.parametrize("code", ["1", "123", "ab", "08%0A"])
def test_get_by_malformed_unique_code_returns_400(client, code):
    r = client.get(BY_CODE_URL.format(code=code))
    assert r.status_code == 400
    assert r.json()["error"] == "Invalid unique code format"
