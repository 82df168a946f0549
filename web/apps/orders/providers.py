"""Service provider helpers for wiring OrderService with its ports.

This module is the composition root of the orders app. ``build_order_service``
wires a store, an allocator and the service together explicitly;
``get_order_service`` does it once per process from Django settings and
hands the same instance to every request. ``settings.ORDERS_STORE``
selects the Django ORM repository (``"db"``, default) or the in-process
stub store (``"memory"``) suitable for local development.
"""

from functools import lru_cache

from django.conf import settings
from .domain import FIXED_PRICE, OrderService, OrderStorePort
from .allocator import DEFAULT_MAX_ATTEMPTS, UniqueCodeAllocator
from .adapters import InMemoryOrderStore
from .repository import OrderRepository


def build_store(kind: str) -> OrderStorePort:
    """Return the order store named by ``kind``.

    Raises:
        ValueError: If ``kind`` is not ``"db"`` or ``"memory"``.
    """
    if kind == "db":
        return OrderRepository()
    if kind == "memory":
        return InMemoryOrderStore()
    raise ValueError(f"Unknown ORDERS_STORE: {kind!r}")


def build_order_service(
    store: OrderStorePort,
    price: int = FIXED_PRICE,
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
) -> OrderService:
    """Wire an OrderService and its allocator around ``store``."""
    allocator = UniqueCodeAllocator(store, max_attempts=max_attempts)
    return OrderService(store=store, allocator=allocator, price=price)


@lru_cache(maxsize=1)
def get_order_service() -> OrderService:
    """Return the process-wide OrderService built from settings.

    Call ``get_order_service.cache_clear()`` after changing the relevant
    settings (tests do this between cases).

    Returns:
        OrderService: A service instance with its store and allocator.
    """
    store = build_store(getattr(settings, "ORDERS_STORE", "db"))
    return build_order_service(
        store,
        price=getattr(settings, "ORDERS_FIXED_PRICE", FIXED_PRICE),
        max_attempts=getattr(settings, "ORDERS_CODE_MAX_ATTEMPTS", DEFAULT_MAX_ATTEMPTS),
    )
