# Copyright (c) 2026 TempoOS Contributors. All Rights Reserved.

"""
API Dependencies — FastAPI dependency injection.
"""

from __future__ import annotations

from fastapi import Request

from tempo_metrics.kernel.registry import MetricRegistry, default_registry


async def get_registry(request: Request) -> MetricRegistry:
    """
    Registry served by the observability routes.

    Apps built by create_app() keep theirs on app.state; anything else
    falls back to the process-wide default registry.
    """
    return getattr(request.app.state, "metric_registry", default_registry)
