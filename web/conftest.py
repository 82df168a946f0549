import pytest

from apps.orders.providers import get_order_service


@pytest.fixture(autouse=True)
def fresh_order_service(settings):
    # Each test gets a service wired from its own settings
    settings.ORDERS_STORE = "db"
    get_order_service.cache_clear()
    yield
    get_order_service.cache_clear()
