"""Repository layer for persisting orders.

This module implements ``OrderStorePort`` on top of the Django ORM. It
keeps a thin interface that returns domain ``Order`` objects and primitive
values so the domain layer is not coupled to ORM types.

Database failures are translated into ``StoreError``; a unique-code
collision on insert becomes ``CodeConflictError`` so the service can tell
it apart from an outage.
"""

from contextlib import contextmanager
from typing import List, Optional

from django.db import DatabaseError, IntegrityError, transaction
from django.db.models import Count
from django.utils import timezone

from .models import OrderModel
from .domain import CodeConflictError, Order, OrderStatus, StoreError


@contextmanager
def _db_errors():
    """Re-raise Django database errors as ``StoreError``."""
    try:
        yield
    except DatabaseError as e:
        raise StoreError(f"Database error: {e}") from e


def _to_domain(obj: OrderModel) -> Order:
    return Order(
        id=obj.id,
        product_id=obj.product_id,
        product_name=obj.product_name,
        price=obj.price,
        unique_code=obj.unique_code,
        status=OrderStatus(obj.status),
        created_at=obj.created_at,
        updated_at=obj.updated_at,
    )


class OrderRepository:
    """Order store backed by the ``orders`` table."""

    def insert(self, product_id: int, product_name: str, price: int, unique_code: str, status: OrderStatus) -> int:
        """Persist a new order row and return its id.

        The insert runs in its own savepoint so a failed insert does not
        break an enclosing transaction.

        Raises:
            CodeConflictError: When ``unique_code`` is already stored.
            StoreError: On any other database failure.
        """
        with _db_errors():
            try:
                with transaction.atomic():
                    obj = OrderModel.objects.create(
                        product_id=product_id,
                        product_name=product_name,
                        price=price,
                        unique_code=unique_code,
                        status=OrderStatus(status).value,
                    )
            except IntegrityError as e:
                if OrderModel.objects.filter(unique_code=unique_code).exists():
                    raise CodeConflictError(unique_code) from e
                raise StoreError(f"Database error: {e}") from e
        return obj.id

    def find_by_id(self, order_id: int) -> Optional[Order]:
        with _db_errors():
            obj = OrderModel.objects.filter(id=order_id).first()
        return _to_domain(obj) if obj else None

    def find_by_code(self, unique_code: str) -> Optional[Order]:
        with _db_errors():
            obj = OrderModel.objects.filter(unique_code=unique_code).first()
        return _to_domain(obj) if obj else None

    def list_page(self, status: Optional[OrderStatus], limit: int, offset: int) -> List[Order]:
        qs = OrderModel.objects.order_by("-created_at", "-id")
        if status is not None:
            qs = qs.filter(status=OrderStatus(status).value)
        with _db_errors():
            return [_to_domain(o) for o in qs[offset:offset + limit]]

    def count(self, status: Optional[OrderStatus] = None) -> int:
        qs = OrderModel.objects.all()
        if status is not None:
            qs = qs.filter(status=OrderStatus(status).value)
        with _db_errors():
            return qs.count()

    def update_status(self, order_id: int, status: OrderStatus) -> int:
        # queryset.update() skips auto_now, so updated_at is set here
        with _db_errors():
            return OrderModel.objects.filter(id=order_id).update(
                status=OrderStatus(status).value,
                updated_at=timezone.now(),
            )

    def list_codes(self) -> List[str]:
        with _db_errors():
            return list(OrderModel.objects.order_by("unique_code").values_list("unique_code", flat=True))

    def count_by_status(self) -> dict[str, int]:
        with _db_errors():
            rows = OrderModel.objects.order_by().values("status").annotate(n=Count("id"))
            return {r["status"]: r["n"] for r in rows}
