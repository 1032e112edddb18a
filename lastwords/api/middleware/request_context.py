"""
Request Context Middleware

Binds request_id, method and path into the structlog context for the
duration of each request, echoes the request id back in X-Request-ID, and
logs one line per completed request.

Usage:
======
    from lastwords.api.middleware import RequestContextMiddleware

    app.add_middleware(RequestContextMiddleware)
"""

import time
import uuid

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from lastwords.shared.core.logging import clear_log_context, get_logger, log_context


REQUEST_ID_HEADER = "X-Request-ID"

access_logger = get_logger("lastwords.access")


class RequestContextMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex
        log_context(request_id=request_id, method=request.method, path=request.url.path)
        started = time.perf_counter()
        try:
            response = await call_next(request)
            response.headers[REQUEST_ID_HEADER] = request_id
            access_logger.info(
                "Request completed",
                status_code=response.status_code,
                duration_ms=round((time.perf_counter() - started) * 1000, 2),
            )
            return response
        finally:
            clear_log_context()
