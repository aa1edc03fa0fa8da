"""
Web App — Request Logging Middleware
=====================================

What:  One access-log line for every HTTP request and response.
How:   Measures wall time around the downstream app and logs status,
       duration, client address, method and path.
Who:   Applied to every request via Starlette middleware.

Log line:
    200 | 0.412ms | 127.0.0.1 | GET "/ping"

What we log vs what we DON'T log:
    ✅ Log: method, path, status, duration, client IP
    ❌ Don't log: query strings, headers, bodies
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

logger = logging.getLogger("web_app.access")


def level_for_status(status: int) -> int:
    """5xx → ERROR, 4xx → WARNING, everything else → INFO."""
    if status >= 500:
        return logging.ERROR
    if status >= 400:
        return logging.WARNING
    return logging.INFO


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Logs structured information about each HTTP request and response.

    Duration is measured from middleware entry to response return, so it
    covers routing, the handler and serialization.

    Requests that crash the handler are not logged here; the exception
    propagates to the catch-all handler in main.py, which logs the traceback.
    """

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        start_time = time.perf_counter()

        # request.client is None for some test transports
        client_ip = request.client.host if request.client else "unknown"
        method = request.method
        path = request.url.path

        response = await call_next(request)

        duration_ms = (time.perf_counter() - start_time) * 1000
        status = response.status_code

        logger.log(
            level_for_status(status),
            '%d | %.3fms | %s | %s "%s"',
            status,
            duration_ms,
            client_ip,
            method,
            path,
            extra={
                "method": method,
                "path": path,
                "status": status,
                "duration_ms": round(duration_ms, 3),
                "client_ip": client_ip,
            },
        )

        return response
