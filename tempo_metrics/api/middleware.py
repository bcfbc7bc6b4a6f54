# Copyright (c) 2026 TempoOS Contributors. All Rights Reserved.

"""
API Middleware — Per-request metering.
"""

from __future__ import annotations

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from tempo_metrics.metrics.base import Meter

logger = logging.getLogger("tempo.metrics.api")


class RequestMeterMiddleware(BaseHTTPMiddleware):
    """
    Marks `meter` once for every request, including ones whose handler
    raised. Also logs request duration.
    """

    def __init__(self, app, meter: Meter) -> None:
        super().__init__(app)
        self.meter = meter

    async def dispatch(self, request: Request, call_next):
        start = time.time()
        status_code = 500
        try:
            response: Response = await call_next(request)
            status_code = response.status_code
            return response
        finally:
            elapsed = (time.time() - start) * 1000
            self.meter.mark(1)
            logger.info(
                "[api] %s %s → %d (%.0fms)",
                request.method, request.url.path, status_code, elapsed,
            )
