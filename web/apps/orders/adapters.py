"""In-process stub adapter for the order store port.

``InMemoryOrderStore`` implements ``OrderStorePort`` without a database.
It is intended for unit tests and local development where deterministic
behavior is useful and no database is required. It enforces the same
one-row-per-code rule as the ``orders`` table.
"""

import itertools
import threading
from dataclasses import replace
from datetime import datetime, timezone
from typing import Dict, List, Optional

from .domain import CodeConflictError, Order, OrderStatus, OrderStorePort


class InMemoryOrderStore(OrderStorePort):
    """Thread-safe dictionary-backed order store.

    Returned orders are copies, so callers cannot mutate stored rows.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._rows: Dict[int, Order] = {}
        self._ids = itertools.count(1)

    def insert(self, product_id: int, product_name: str, price: int, unique_code: str, status: OrderStatus) -> int:
        with self._lock:
            if any(o.unique_code == unique_code for o in self._rows.values()):
                raise CodeConflictError(unique_code)
            now = datetime.now(timezone.utc)
            oid = next(self._ids)
            self._rows[oid] = Order(
                id=oid,
                product_id=product_id,
                product_name=product_name,
                price=price,
                unique_code=unique_code,
                status=OrderStatus(status),
                created_at=now,
                updated_at=now,
            )
            return oid

    def find_by_id(self, order_id: int) -> Optional[Order]:
        with self._lock:
            o = self._rows.get(order_id)
            return replace(o) if o else None

    def find_by_code(self, unique_code: str) -> Optional[Order]:
        with self._lock:
            for o in self._rows.values():
                if o.unique_code == unique_code:
                    return replace(o)
            return None

    def _select(self, status: Optional[OrderStatus]) -> List[Order]:
        rows = [o for o in self._rows.values() if status is None or o.status == status]
        rows.sort(key=lambda o: (o.created_at, o.id), reverse=True)
        return rows

    def list_page(self, status: Optional[OrderStatus], limit: int, offset: int) -> List[Order]:
        with self._lock:
            return [replace(o) for o in self._select(status)[offset:offset + limit]]

    def count(self, status: Optional[OrderStatus] = None) -> int:
        with self._lock:
            return len(self._select(status))

    def update_status(self, order_id: int, status: OrderStatus) -> int:
        with self._lock:
            o = self._rows.get(order_id)
            if o is None:
                return 0
            o.status = OrderStatus(status)
            o.updated_at = datetime.now(timezone.utc)
            return 1

    def list_codes(self) -> List[str]:
        with self._lock:
            return sorted(o.unique_code for o in self._rows.values())

    def count_by_status(self) -> dict[str, int]:
        counts: dict[str, int] = {}
        with self._lock:
            for o in self._rows.values():
                counts[o.status.value] = counts.get(o.status.value, 0) + 1
        return counts
