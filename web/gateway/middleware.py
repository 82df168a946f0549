"""Middleware that assigns and propagates a request identifier.

Every incoming HTTP request receives a request identifier. The identifier
is read from the incoming ``X-Request-Id`` header when provided by the
client, or generated server-side (UUIDv4) otherwise. The middleware stores
the id on the ``request`` object and in a context variable so code running
downstream (the orders service, log filters) can read it without passing
the value explicitly. Responses echo the id in ``X-Request-ID``.
"""

import logging
import uuid
import contextvars

from django.utils.deprecation import MiddlewareMixin

REQUEST_ID_CTX = contextvars.ContextVar("request_id", default="-")

logger = logging.getLogger("gateway")


class RequestIdMiddleware(MiddlewareMixin):
    """Django middleware that sets and returns a per-request identifier.

    Attributes:
        HEADER (str): The incoming header in ``request.META`` casing.
        RESPONSE_HEADER (str): The header added to outgoing responses.
    """

    HEADER = "HTTP_X_REQUEST_ID"
    RESPONSE_HEADER = "X-Request-ID"
    async_capable = False

    def __call__(self, request):
        try:
            return super().__call__(request)
        finally:
            token = getattr(request, "_request_id_token", None)
            if token is not None:
                REQUEST_ID_CTX.reset(token)

    def process_request(self, request):
        rid = request.META.get(self.HEADER) or str(uuid.uuid4())
        request.request_id = rid
        request._request_id_token = REQUEST_ID_CTX.set(rid)

    def process_response(self, request, response):
        """Add the request id header and log the request.

        The context variable stays set until ``__call__`` returns, so log
        lines written while the response unwinds still carry the id.

        Args:
            request: Django HttpRequest.
            response: Django HttpResponse to modify.

        Returns:
            The same HttpResponse with the ``X-Request-ID`` header set.
        """
        rid = getattr(request, "request_id", REQUEST_ID_CTX.get())
        response[self.RESPONSE_HEADER] = rid
        logger.info(
            "request handled",
            extra={"path": request.path, "method": request.method, "status_code": response.status_code},
        )
        return response
