"""Domain models, ports and service for orders.

This module contains the dataclasses used as DTOs for orders, the protocol
definition (port) for the order store, the result containers returned to
callers, and the domain service that orchestrates order creation, status
changes, listing and statistics.
"""

import logging
import random
from dataclasses import dataclass
from datetime import datetime
from typing import Any, List, Optional, Protocol
from enum import Enum

logger = logging.getLogger("orders")

FIXED_PRICE = 299000

TEST_CATALOG = (
    (1, "Produk A"),
    (2, "Produk B"),
    (3, "Produk C"),
    (4, "Produk D"),
    (5, "Produk E"),
)


# ---- Enums ----
class OrderStatus(str, Enum):
    """Enumeration of the possible order statuses.

    Any status may follow any other; the service does not enforce a
    transition graph and no status has entry side effects.
    """

    PENDING = "pending"
    PAID = "paid"
    CANCELLED = "cancelled"
    COMPLETED = "completed"


# ---- Errors ----
class StoreError(Exception):
    """Raised by store adapters when the underlying persistence fails.

    A missing row is never a StoreError; adapters return an empty result
    for that case.
    """


class CodeConflictError(StoreError):
    """Raised on insert when another row already holds the unique code."""

    def __init__(self, unique_code: str):
        super().__init__(f"Unique code {unique_code} is already taken")
        self.unique_code = unique_code


class AllocationExhausted(Exception):
    """Raised when no free unique code was found within the attempt budget."""

    def __init__(self, attempts: int):
        super().__init__(f"Unable to generate unique code after {attempts} attempts")
        self.attempts = attempts


# ---- Entities / DTOs ----
@dataclass
class Order:
    """Container for order data.

    Attributes:
        id: Store-assigned identifier.
        product_id: Catalog item identifier (not checked against a catalog).
        product_name: Free-text product label.
        price: Price fixed at creation time.
        unique_code: Two-digit payment disambiguation code.
        status: Current OrderStatus.
        created_at: Creation timestamp set by the store.
        updated_at: Last modification timestamp set by the store.
    """

    id: int
    product_id: int
    product_name: str
    price: int
    unique_code: str
    status: OrderStatus = OrderStatus.PENDING
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


@dataclass
class ServiceResult:
    """Outcome of a service operation.

    Attributes:
        success: Whether the operation succeeded.
        data: Payload on success (an Order, a list of orders or a dict).
        error: Human-readable error message on failure.
        message: Optional informational message on success.
        code: Short machine code describing the failure kind
            (NOT_FOUND, CODE_POOL_EXHAUSTED, STORE_UNAVAILABLE).
    """

    success: bool
    data: Any = None
    error: Optional[str] = None
    message: Optional[str] = None
    code: Optional[str] = None

    @classmethod
    def ok(cls, data: Any = None, message: Optional[str] = None) -> "ServiceResult":
        return cls(success=True, data=data, message=message)

    @classmethod
    def fail(cls, error: str, code: str) -> "ServiceResult":
        return cls(success=False, error=error, code=code)


@dataclass
class PageResult(ServiceResult):
    """ServiceResult for list operations, with pagination metadata."""

    total: int = 0
    page: int = 1
    limit: int = 10


# ---- Ports (DIP) ----
class OrderStorePort(Protocol):
    """Port describing the persistence operations used by the domain.

    Implementers return empty results (None, [] or 0) when nothing
    matches and raise StoreError when the underlying store fails.
    """

    def insert(self, product_id: int, product_name: str, price: int, unique_code: str, status: OrderStatus) -> int:
        """Persist a new order row and return its generated id.

        Raises:
            CodeConflictError: If ``unique_code`` is already persisted.
            StoreError: On any other persistence failure.
        """
        raise NotImplementedError()

    def find_by_id(self, order_id: int) -> Optional[Order]:
        raise NotImplementedError()

    def find_by_code(self, unique_code: str) -> Optional[Order]:
        raise NotImplementedError()

    def list_page(self, status: Optional[OrderStatus], limit: int, offset: int) -> List[Order]:
        """Return one page of orders, newest first, optionally filtered."""
        raise NotImplementedError()

    def count(self, status: Optional[OrderStatus] = None) -> int:
        raise NotImplementedError()

    def update_status(self, order_id: int, status: OrderStatus) -> int:
        """Set the status of one order and return the affected row count."""
        raise NotImplementedError()

    def list_codes(self) -> List[str]:
        """Return every persisted unique code in ascending order."""
        raise NotImplementedError()

    def count_by_status(self) -> dict[str, int]:
        raise NotImplementedError()


class CodeAllocatorPort(Protocol):
    """Port for the unique-code allocator (see ``allocator.py``)."""

    def allocate(self) -> str:
        raise NotImplementedError()

    def statistics(self) -> Any:
        raise NotImplementedError()


# ---- Domain service ----
class OrderService:
    """Domain service for the order lifecycle.

    Every public operation returns a ServiceResult instead of raising, so a
    failing store or an exhausted code pool never escapes to the caller as
    an exception. Input validation (positive ids, non-empty names, known
    statuses, pagination bounds) is the caller's job.

    The store enforces code uniqueness. When an insert collides with a
    code taken by a concurrent writer between the allocator's lookup and the
    insert, ``create`` allocates again and retries the insert once.
    """

    CONFLICT_RETRIES = 1

    def __init__(
        self,
        store: OrderStorePort,
        allocator: CodeAllocatorPort,
        price: int = FIXED_PRICE,
        rng: random.Random | None = None,
    ):
        """Initialize the service with required dependencies.

        Args:
            store: OrderStorePort used for every read and write.
            allocator: Allocator that hands out unused codes.
            price: Price assigned to every new order.
            rng: Random source used by ``generate_test_orders``.
        """
        self.store = store
        self.allocator = allocator
        self.price = price
        self._rng = rng or random.Random()

    def create(self, product_id: int, product_name: str) -> ServiceResult:
        """Create a pending order with a freshly allocated unique code.

        Allocation happens before the insert; when it fails nothing is
        persisted. The stored row is read back by its new id and returned.

        Args:
            product_id: Positive catalog item identifier.
            product_name: Non-empty product label.

        Returns:
            ServiceResult with the created Order, or a failure with code
            CODE_POOL_EXHAUSTED or STORE_UNAVAILABLE.
        """
        try:
            order_id = self._insert_pending(product_id, product_name)
            created = self.store.find_by_id(order_id)
        except AllocationExhausted as e:
            logger.warning("code allocation exhausted", extra={"attempts": e.attempts})
            return ServiceResult.fail(str(e), "CODE_POOL_EXHAUSTED")
        except StoreError as e:
            logger.exception("error creating order")
            return ServiceResult.fail(str(e), "STORE_UNAVAILABLE")

        if created is None:
            return ServiceResult.fail("Order not found", "NOT_FOUND")
        logger.info("order created", extra={"order_id": created.id, "unique_code": created.unique_code})
        return ServiceResult.ok(created, message="Order created successfully")

    def _insert_pending(self, product_id: int, product_name: str) -> int:
        retries = 0
        while True:
            code = self.allocator.allocate()
            try:
                return self.store.insert(product_id, product_name, self.price, code, OrderStatus.PENDING)
            except CodeConflictError:
                if retries >= self.CONFLICT_RETRIES:
                    raise
                retries += 1
                logger.warning("unique code taken concurrently, retrying", extra={"unique_code": code})

    def get_by_id(self, order_id: int) -> ServiceResult:
        """Return the order with the given id or a NOT_FOUND failure."""
        try:
            order = self.store.find_by_id(order_id)
        except StoreError as e:
            logger.exception("error getting order")
            return ServiceResult.fail(str(e), "STORE_UNAVAILABLE")
        if order is None:
            return ServiceResult.fail("Order not found", "NOT_FOUND")
        return ServiceResult.ok(order)

    def list_orders(self, page: int = 1, limit: int = 10) -> PageResult:
        """Return one page of all orders, most recent first."""
        return self._page(None, page, limit)

    def list_by_status(self, status: OrderStatus, page: int = 1, limit: int = 10) -> PageResult:
        """Return one page of orders in ``status``, most recent first."""
        return self._page(OrderStatus(status), page, limit)

    def _page(self, status: Optional[OrderStatus], page: int, limit: int) -> PageResult:
        offset = (page - 1) * limit
        try:
            orders = self.store.list_page(status, limit, offset)
            total = self.store.count(status)
        except StoreError as e:
            logger.exception("error listing orders")
            return PageResult(success=False, error=str(e), code="STORE_UNAVAILABLE", page=page, limit=limit)
        return PageResult(success=True, data=orders, total=total, page=page, limit=limit)

    def update_status(self, order_id: int, status: OrderStatus) -> ServiceResult:
        """Move an order to ``status`` and return the refreshed row.

        Any status may follow any other. A missing order yields NOT_FOUND
        and nothing is written.
        """
        status = OrderStatus(status)
        try:
            affected = self.store.update_status(order_id, status)
            if affected == 0:
                return ServiceResult.fail("Order not found", "NOT_FOUND")
            order = self.store.find_by_id(order_id)
        except StoreError as e:
            logger.exception("error updating order status")
            return ServiceResult.fail(str(e), "STORE_UNAVAILABLE")
        if order is None:
            return ServiceResult.fail("Order not found", "NOT_FOUND")
        logger.info("order status updated", extra={"order_id": order_id, "status": status.value})
        return ServiceResult.ok(order, message="Order status updated successfully")

    def get_by_unique_code(self, unique_code: str) -> ServiceResult:
        """Exact-match lookup by unique code."""
        try:
            order = self.store.find_by_code(unique_code)
        except StoreError as e:
            logger.exception("error getting order by unique code")
            return ServiceResult.fail(str(e), "STORE_UNAVAILABLE")
        if order is None:
            return ServiceResult.fail("Order not found", "NOT_FOUND")
        return ServiceResult.ok(order)

    def generate_test_orders(self, count: int = 50) -> ServiceResult:
        """Create ``count`` orders for random products of the test catalog.

        Individual failures (for example an exhausted code pool) are only
        counted. The result is always successful and reports how many
        orders were actually created.
        """
        created = 0
        for _ in range(count):
            product_id, product_name = self._rng.choice(TEST_CATALOG)
            if self.create(product_id, product_name).success:
                created += 1
        logger.info("test orders generated", extra={"requested": count, "created_count": created})
        return ServiceResult.ok(
            {"requested": count, "created": created},
            message=f"Successfully created {created} test orders",
        )

    def statistics(self) -> ServiceResult:
        """Return order counts per status plus the code pool usage."""
        try:
            total = self.store.count()
            by_status = self.store.count_by_status()
            code_stats = self.allocator.statistics()
        except StoreError as e:
            logger.exception("error getting order statistics")
            return ServiceResult.fail(str(e), "STORE_UNAVAILABLE")

        stats = {"total_orders": total}
        for st in OrderStatus:
            stats[f"{st.value}_orders"] = by_status.get(st.value, 0)
        stats["code_statistics"] = code_stats
        return ServiceResult.ok(stats)
