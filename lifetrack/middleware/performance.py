"""
Request timing middleware

Logs every request's method, endpoint, status and duration, and warns on
slow requests and error responses.
"""

import time
import logging
from fastapi import Request

from lifetrack.core.config import settings

logger = logging.getLogger(__name__)


class PerformanceMiddleware:
    """Middleware to log HTTP request timings"""

    def __init__(self, app):
        self.app = app

    async def __call__(self, scope, receive, send):
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        request = Request(scope, receive)

        # Skip monitoring for certain paths
        if self._should_skip_monitoring(request.url.path):
            await self.app(scope, receive, send)
            return

        start_time = time.perf_counter()
        status_code = 200

        async def send_wrapper(message):
            nonlocal status_code
            if message["type"] == "http.response.start":
                status_code = message["status"]
            await send(message)

        try:
            await self.app(scope, receive, send_wrapper)
        except Exception as e:
            status_code = 500
            logger.error(f"Request processing error: {e}")
            raise
        finally:
            response_time_ms = (time.perf_counter() - start_time) * 1000
            self._log_request(request, status_code, response_time_ms)

    def _should_skip_monitoring(self, path: str) -> bool:
        """Determine if we should skip monitoring for this path"""
        skip_paths = [
            "/docs",
            "/redoc",
            "/openapi.json",
            "/favicon.ico",
            "/health",
        ]
        return any(path.startswith(skip_path) or path.endswith(skip_path) for skip_path in skip_paths)

    def _log_request(self, request: Request, status_code: int, response_time_ms: float):
        endpoint = self._clean_endpoint_path(request.url.path)

        if response_time_ms > settings.SLOW_REQUEST_MS:
            logger.warning(
                f"Slow request: {request.method} {endpoint} "
                f"took {response_time_ms:.0f}ms (status: {status_code})"
            )
        elif status_code >= 400:
            logger.warning(
                f"Request error: {request.method} {endpoint} "
                f"returned {status_code} in {response_time_ms:.0f}ms"
            )
        else:
            logger.debug(f"{request.method} {endpoint} {status_code} in {response_time_ms:.0f}ms")

    def _clean_endpoint_path(self, path: str) -> str:
        """Replace numeric ids with a placeholder so endpoints group together"""
        return "/".join("{id}" if part.isdigit() else part for part in path.split("/"))
