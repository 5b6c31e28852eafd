"""
Request logging middleware.
"""

import time

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

from ...utils.logging import get_logger

logger = get_logger("api")


class LoggingMiddleware(BaseHTTPMiddleware):
    """Log method, path, status and latency of every request."""

    async def dispatch(self, request: Request, call_next):
        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.info(
            "%s %s -> %s (%.1f ms)",
            request.method,
            request.url.path,
            response.status_code,
            elapsed_ms,
        )
        return response
