"""
Brain Cards Backend — Request Logging Middleware
=================================================

What:  One access-log line per HTTP request, written after the response is built.

    POST /api/category -> 201 in 2.4ms [a1b2c3d4] category=bc1a2b3c4d5e
    GET /api/category/bcmissing000 -> 404 in 0.9ms [e5f6a7b8] category=bcmissing000

The category id is whatever the route handler recorded on request.state:
the id created by POST, or the id looked up by GET /category/{id}.
Request bodies are never logged.
"""

import logging
import time
from typing import Optional

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from braincards.config import settings
from braincards.middleware.request_id import request_id_var

logger = logging.getLogger("braincards.access")


def level_for_status(status: int) -> int:
    if status >= 500:
        return logging.ERROR
    if status >= 400:
        return logging.WARNING
    return logging.INFO


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Writes the access log, tagging lines with the category a request touched."""

    def __init__(self, app, **kwargs):
        super().__init__(app, **kwargs)
        self.health_path = f"{settings.api_prefix}/health"

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        if request.url.path == self.health_path:
            return await call_next(request)

        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000

        category_id: Optional[str] = getattr(request.state, "category_id", None)
        suffix = f" category={category_id}" if category_id is not None else ""
        logger.log(
            level_for_status(response.status_code),
            "%s %s -> %d in %.1fms [%s]%s",
            request.method,
            request.url.path,
            response.status_code,
            elapsed_ms,
            request_id_var.get(""),
            suffix,
            extra={"category_id": category_id, "status": response.status_code},
        )
        return response
