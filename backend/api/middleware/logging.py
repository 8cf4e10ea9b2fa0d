"""Request/response logging middleware."""

from __future__ import annotations

import logging
import time
from typing import Callable

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

from backend.core.config import settings
from backend.utils.monitoring import observe_request

logger = logging.getLogger("directory.api")


class LoggingMiddleware(BaseHTTPMiddleware):
    """Structured logging and Prometheus metrics for inbound HTTP requests."""

    def __init__(self, app, *, prefix: str = settings.API_PREFIX) -> None:
        super().__init__(app)
        self.prefix = prefix

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        start_time = time.perf_counter()
        response = await call_next(request)
        duration = time.perf_counter() - start_time

        observe_request(request, response.status_code, duration, self.prefix)

        logger.info(
            "request.completed",
            extra={
                "path": request.url.path,
                "method": request.method,
                "status": response.status_code,
                "duration_ms": round(duration * 1000, 2),
                "client": request.client.host if request.client else None,
            },
        )

        return response
