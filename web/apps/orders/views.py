"""HTTP views for the orders app.

This module contains DRF API views for the orders service. Views are kept
intentionally small: they validate requests (via Pydantic), delegate to the
domain service, and map the returned ``ServiceResult`` to an HTTP response.

The views obtain the configured ``OrderService`` from
``providers.get_order_service()``, which owns the process-wide store and
allocator. Every response body has the shape
``{"success": bool, "data"?, "error"?, "message"?}``; list responses add
``total``, ``page`` and ``limit``.

Failure codes map to HTTP statuses: validation -> 400, ``NOT_FOUND`` ->
404, ``CODE_POOL_EXHAUSTED`` -> 409, ``STORE_UNAVAILABLE`` -> 503.
"""
from pydantic import ValidationError
from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework import status

from . import providers
from .domain import Order, PageResult, ServiceResult
from .schemas import (
    CreateOrderDTO,
    GenerateTestOrdersDTO,
    OrderReadDTO,
    OrderStatisticsDTO,
    PageQueryDTO,
    UniqueCodeDTO,
    UpdateStatusDTO,
)

ERROR_STATUS = {
    "NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "CODE_POOL_EXHAUSTED": status.HTTP_409_CONFLICT,
    "STORE_UNAVAILABLE": status.HTTP_503_SERVICE_UNAVAILABLE,
}


def _order(o: Order) -> dict:
    return OrderReadDTO.model_validate(o, from_attributes=True).model_dump(mode="json")


def _bad_request(e: ValidationError | str) -> Response:
    if isinstance(e, ValidationError):
        detail = "; ".join(f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in e.errors())
    else:
        detail = e
    return Response({"success": False, "error": detail}, status=status.HTTP_400_BAD_REQUEST)


def _render(result: ServiceResult, ok_status: int = status.HTTP_200_OK, serialize=_order) -> Response:
    """Turn a ServiceResult into a DRF Response.

    Args:
        result: Outcome returned by the domain service.
        ok_status: HTTP status to use on success.
        serialize: Converts ``result.data`` to a JSON-ready value.
    """
    if not result.success:
        code = ERROR_STATUS.get(result.code, status.HTTP_500_INTERNAL_SERVER_ERROR)
        return Response({"success": False, "error": result.error}, status=code)

    body = {"success": True}
    if result.data is not None:
        body["data"] = serialize(result.data)
    if result.message:
        body["message"] = result.message
    if isinstance(result, PageResult):
        body.update(total=result.total, page=result.page, limit=result.limit)
    return Response(body, status=ok_status)


def _orders(orders: list[Order]) -> list[dict]:
    return [_order(o) for o in orders]


class OrdersPingView(APIView):
    """Simple health-check endpoint for the orders module."""

    def get(self, request):
        return Response({"ok": True})


class OrdersCollectionView(APIView):
    """List orders (GET) or create one (POST)."""

    def get(self, request):
        try:
            q = PageQueryDTO.model_validate(request.query_params.dict())
        except ValidationError as e:
            return _bad_request(e)
        result = providers.get_order_service().list_orders(q.page, q.limit)
        return _render(result, serialize=_orders)

    def post(self, request):
        """Create a new order.

        Args:
            request (Request): DRF request with JSON body
                ``{"product_id": int, "product_name": str}``.

        Returns:
            Response: One of the following responses.
            - 201 with the created order.
            - 400 for DTO validation errors.
            - 409 when no free unique code could be allocated.
            - 503 when the store is unavailable.
        """
        try:
            dto = CreateOrderDTO.model_validate(request.data)
        except ValidationError as e:
            return _bad_request(e)

        result = providers.get_order_service().create(dto.product_id, dto.product_name)
        return _render(result, ok_status=status.HTTP_201_CREATED)


class RetrieveOrderView(APIView):
    def get(self, request, oid: int):
        return _render(providers.get_order_service().get_by_id(oid))


class OrderStatusView(APIView):
    """Change the status of an order (PATCH)."""

    def patch(self, request, oid: int):
        try:
            dto = UpdateStatusDTO.model_validate(request.data)
        except ValidationError:
            return _bad_request("Invalid status. Must be one of: pending, paid, cancelled, completed")
        return _render(providers.get_order_service().update_status(oid, dto.status))


class OrdersByStatusView(APIView):
    def get(self, request, order_status: str):
        try:
            dto = UpdateStatusDTO.model_validate({"status": order_status})
        except ValidationError:
            return _bad_request("Invalid status. Must be one of: pending, paid, cancelled, completed")
        try:
            q = PageQueryDTO.model_validate(request.query_params.dict())
        except ValidationError as e:
            return _bad_request(e)
        result = providers.get_order_service().list_by_status(dto.status, q.page, q.limit)
        return _render(result, serialize=_orders)


class OrderByCodeView(APIView):
    def get(self, request, unique_code: str):
        try:
            dto = UniqueCodeDTO.model_validate({"unique_code": unique_code})
        except ValidationError:
            return _bad_request("Invalid unique code format")
        return _render(providers.get_order_service().get_by_unique_code(dto.unique_code))


class GenerateTestOrdersView(APIView):
    """Bulk-create test orders (``POST ?count=N``, 1..1000, default 50)."""

    def post(self, request):
        try:
            q = GenerateTestOrdersDTO.model_validate(request.query_params.dict())
        except ValidationError:
            return _bad_request("Count must be between 1 and 1000")
        result = providers.get_order_service().generate_test_orders(q.count)
        return _render(result, serialize=dict)


class OrderStatisticsView(APIView):
    def get(self, request):
        result = providers.get_order_service().statistics()
        return _render(
            result,
            serialize=lambda d: OrderStatisticsDTO.model_validate(d, from_attributes=True).model_dump(),
        )
