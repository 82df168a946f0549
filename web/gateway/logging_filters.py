"""Logging filters for enriching log records with request context.

The filter injects the current request id into log records using the
ContextVar set by the gateway middleware, so every order log line can be
correlated with the HTTP request that produced it.
"""

from logging import Filter, LogRecord
from .middleware import REQUEST_ID_CTX


class RequestIdFilter(Filter):
    """Attach a ``request_id`` attribute to log records.

    Records logged by ``django.request`` carry the request itself and are
    stamped from it, since Django writes its 4xx/5xx lines after the
    middleware chain has returned. Otherwise the ContextVar is used; its
    default ("-") applies outside a request, so formatters can always
    reference ``%(request_id)s``.
    """

    def filter(self, record: LogRecord) -> bool:
        request = getattr(record, "request", None)
        record.request_id = getattr(request, "request_id", None) or REQUEST_ID_CTX.get()
        return True
