# billing/core/middleware.py
"""Request logging middleware."""

import logging
import time
from typing import Callable

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

logger = logging.getLogger("billing.requests")


class LoggingMiddleware(BaseHTTPMiddleware):
    """Log method, path, status and processing time of every API request."""

    def __init__(self, app: ASGIApp, application_id: str = "billing"):
        super().__init__(app)
        self.application_id = application_id

    async def dispatch(self, request: Request, call_next: Callable):
        start_time = time.perf_counter()
        response = await call_next(request)
        processing_time = (time.perf_counter() - start_time) * 1000
        logger.info(
            "[%s] %s %s %d %.1fms",
            self.application_id,
            request.method,
            request.url.path,
            response.status_code,
            processing_time,
        )
        return response
