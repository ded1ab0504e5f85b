"""
SnapEdit Backend: Request Logging Middleware
===============================================

What:  One access log line per request: method, path, status, duration, request ID.
When:  Runs inside RequestIDMiddleware, so the correlation ID is already set.

What we log vs what we DON'T log (privacy):
    ✅ Log: method, path, status, duration, IP, request ID, caller id
    ❌ Don't log: request bodies (image URLs and edit payloads are user data)
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from snapedit.config import settings
from snapedit.middleware.request_id import request_id_var

logger = logging.getLogger("snapedit.access")


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Logs method, path, status and duration for every non-health request.

    Level follows the status: 5xx → ERROR, 4xx → WARNING, otherwise INFO.
    """

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        start_time = time.perf_counter()

        path = request.url.path
        if path == "/health":
            return await call_next(request)

        client_ip = request.client.host if request.client else "unknown"
        caller = request.headers.get(settings.auth_user_header) or "-"
        rid = request_id_var.get("")

        response = await call_next(request)

        duration_ms = (time.perf_counter() - start_time) * 1000
        status = response.status_code
        if status >= 500:
            log_level = logging.ERROR
        elif status >= 400:
            log_level = logging.WARNING
        else:
            log_level = logging.INFO

        logger.log(
            log_level,
            "%s %s %d %.1fms [%s] user=%s from %s",
            request.method,
            path,
            status,
            duration_ms,
            rid,
            caller,
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
