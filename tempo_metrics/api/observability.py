# Copyright (c) 2026 TempoOS Contributors. All Rights Reserved.

"""
Observability API — Health check and live metric values.
"""

from __future__ import annotations

from typing import Any, Dict

from fastapi import APIRouter, Depends, Request

from tempo_metrics import __version__
from tempo_metrics.api.deps import get_registry
from tempo_metrics.api.errors import MetricNotFoundError
from tempo_metrics.kernel.registry import MetricRegistry

router = APIRouter(tags=["observability"])


@router.get("/health")
async def health_check(registry: MetricRegistry = Depends(get_registry)):
    return {
        "status": "ok",
        "version": __version__,
        "metrics": len(registry),
    }


@router.get("/api/metrics")
async def list_metrics(
    registry: MetricRegistry = Depends(get_registry),
) -> Dict[str, Any]:
    """Return the exported value of every registered metric."""
    return {
        name: metric.export_metric().to_dict()
        for name, metric in registry.items()
    }


@router.get("/api/metrics/{name}")
async def get_metric(
    name: str,
    request: Request,
    registry: MetricRegistry = Depends(get_registry),
) -> Dict[str, Any]:
    metric = registry.get(name)
    if metric is None:
        raise MetricNotFoundError(name, trace_id=request.headers.get("X-Trace-Id"))
    return {"name": name, **metric.export_metric().to_dict()}
