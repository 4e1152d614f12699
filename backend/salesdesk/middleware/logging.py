"""
SalesDesk API — Request Logging Middleware
===========================================

What:  One access log line per HTTP request.
How:   Measures handler duration and logs method, path, status, duration,
       request ID and client IP. Level follows the status class:
       5xx → ERROR, 4xx → WARNING, everything else → INFO.
When:  Inside RequestIDMiddleware, so the request ID is already set.

Request bodies are never logged (customer records carry phone numbers).
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from salesdesk.middleware.request_id import request_id_var

logger = logging.getLogger("salesdesk.access")

# Probed every few seconds by orchestrators; not worth a log line each
SKIP_PATHS = frozenset({"/health"})


def level_for_status(status: int) -> int:
    if status >= 500:
        return logging.ERROR
    if status >= 400:
        return logging.WARNING
    return logging.INFO


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Access logging with duration and request ID correlation."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        path = request.url.path
        if path in SKIP_PATHS:
            return await call_next(request)

        start_time = time.perf_counter()
        response = await call_next(request)
        duration_ms = (time.perf_counter() - start_time) * 1000

        client_ip = request.client.host if request.client else "unknown"
        rid = request_id_var.get("")
        status = response.status_code

        logger.log(
            level_for_status(status),
            "%s %s %d %.1fms [%s] from %s",
            request.method,
            path,
            status,
            duration_ms,
            rid,
            client_ip,
            extra={
                "request_id": rid,
                "method": request.method,
                "path": path,
                "status": status,
                "duration_ms": round(duration_ms, 2),
                "client_ip": client_ip,
            },
        )
        return response
