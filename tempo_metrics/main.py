# Copyright (c) 2026 TempoOS Contributors. All Rights Reserved.

"""
tempo-metrics Application Entry Point.

FastAPI app exposing the observability routes, metering every request,
and running the tick/report scheduler for the app's lifetime.

    uvicorn tempo_metrics.main:app
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from tempo_metrics import __version__
from tempo_metrics.api.errors import APIError, api_error_handler
from tempo_metrics.api.middleware import RequestMeterMiddleware
from tempo_metrics.api.observability import router as observability_router
from tempo_metrics.core.config import MetricsSettings, settings as default_settings
from tempo_metrics.core.logging import setup_logging
from tempo_metrics.kernel.registry import MetricRegistry
from tempo_metrics.metrics.meter import StdMeter
from tempo_metrics.reporter.carbon import CarbonReporter
from tempo_metrics.reporter.transport import CarbonTransport
from tempo_metrics.runtime.scheduler import ReportScheduler

logger = logging.getLogger("tempo.metrics.main")

REQUEST_METER_NAME = "http.requests"


def create_app(
    settings: Optional[MetricsSettings] = None,
    registry: Optional[MetricRegistry] = None,
    start_scheduler: bool = True,
) -> FastAPI:
    """Build the app, its reporter and its scheduler from settings."""
    settings = settings or default_settings
    registry = registry if registry is not None else MetricRegistry()

    reporter = CarbonReporter(
        settings.APP_NAME,
        settings.CARBON_ADDRESS,
        settings.METRIC_PREFIX,
        settings.MAX_BATCH_BYTES,
        transport=CarbonTransport(settings.CARBON_ADDRESS, timeout=settings.SOCKET_TIMEOUT),
        registry=registry,
    )
    scheduler = ReportScheduler(
        reporter,
        registry,
        tick_interval=settings.TICK_INTERVAL,
        report_interval=settings.REPORT_INTERVAL,
    )
    request_meter = StdMeter(
        windows=settings.METER_WINDOWS,
        tick_interval=settings.TICK_INTERVAL,
    )
    reporter.add(REQUEST_METER_NAME, request_meter)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Startup
        setup_logging(settings.LOG_LEVEL)
        if start_scheduler:
            await scheduler.start()
        logger.info(
            "[tempo-metrics] Reporting to %s every %.1fs",
            settings.CARBON_ADDRESS, settings.REPORT_INTERVAL,
        )
        yield
        # Shutdown
        if start_scheduler:
            await scheduler.stop()
        else:
            reporter.close()
        logger.info("[tempo-metrics] Shutdown complete")

    app = FastAPI(
        title="tempo-metrics",
        description="In-process metrics with Graphite/Carbon reporting",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.metric_registry = registry
    app.state.reporter = reporter
    app.state.scheduler = scheduler

    # ── Middleware ───────────────────────────────────────────────
    app.add_middleware(RequestMeterMiddleware, meter=request_meter)

    # ── Error Handlers ──────────────────────────────────────────
    app.add_exception_handler(APIError, api_error_handler)

    # ── Routes ──────────────────────────────────────────────────
    app.include_router(observability_router)
    return app


app = create_app()
