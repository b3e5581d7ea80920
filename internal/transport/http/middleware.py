"""
HTTP Middleware for the Product Catalog.

Provides middleware components for request processing.
"""

import uuid

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from pkg.logger.logger import bind_context, clear_context, set_request_id

from .metrics import MetricsMiddleware

REQUEST_ID_HEADER = "X-Request-ID"


class RequestContextMiddleware(BaseHTTPMiddleware):
    """
    Add a request ID to the logging context and echo it back.

    Uses the caller's X-Request-ID header when present.
    """

    async def dispatch(self, request: Request, call_next) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())

        clear_context()
        set_request_id(request_id)
        bind_context(http_method=request.method, path=request.url.path)

        response = await call_next(request)
        response.headers[REQUEST_ID_HEADER] = request_id
        return response


__all__ = [
    "MetricsMiddleware",
    "RequestContextMiddleware",
    "REQUEST_ID_HEADER",
]
