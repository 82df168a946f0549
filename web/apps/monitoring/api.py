"""Health endpoint reporting database reachability and code pool headroom."""

import logging

from django.db import DatabaseError, connection
from django.http import JsonResponse

from apps.orders import providers
from apps.orders.domain import StoreError

logger = logging.getLogger("monitoring")


def health_view(_request):
    db_ok = True
    try:
        with connection.cursor() as cur:
            cur.execute("SELECT 1;")
    except DatabaseError:
        logger.exception("database health check failed")
        db_ok = False

    codes = {"ok": False}
    if db_ok:
        try:
            stats = providers.get_order_service().allocator.statistics()
            codes = {"ok": True, "available": stats.available_codes, "total": stats.total_codes}
        except StoreError:
            logger.exception("code pool health check failed")

    ok = db_ok and codes["ok"]
    return JsonResponse(
        {"ok": ok, "components": {"db": {"ok": db_ok}, "code_pool": codes}},
        status=200 if ok else 503,
    )
