# Copyright (c) 2026 TempoOS Contributors. All Rights Reserved.
"""Unit tests for Observability API."""

import pytest
from fastapi import FastAPI
from httpx import AsyncClient, ASGITransport

from tempo_metrics.api.middleware import RequestMeterMiddleware
from tempo_metrics.core.config import MetricsSettings
from tempo_metrics.main import REQUEST_METER_NAME, create_app
from tempo_metrics.metrics.counter import StdCounter
from tempo_metrics.metrics.gauge import StdGauge
from tempo_metrics.metrics.meter import StdMeter


class TestObservabilityAPI:
    @pytest.fixture
    def app(self, registry):
        settings = MetricsSettings(_env_file=None, CARBON_ADDRESS="carbon:2003")
        return create_app(settings=settings, registry=registry, start_scheduler=False)

    @pytest.mark.asyncio
    async def test_health(self, app):
        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as c:
            resp = await c.get("/health")
            assert resp.status_code == 200
            data = resp.json()
            assert data["status"] == "ok"
            assert data["metrics"] == 1  # the request meter

    @pytest.mark.asyncio
    async def test_metrics(self, app, registry):
        c = StdCounter()
        c.inc(4)
        registry.register("jobs", c)
        registry.register("queue_depth", StdGauge(7))

        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            resp = await client.get("/api/metrics")
            assert resp.status_code == 200
            data = resp.json()
            assert data["jobs"] == {"type": "counter", "value": 4}
            assert data["queue_depth"] == {"type": "gauge", "value": 7}
            assert data[REQUEST_METER_NAME]["type"] == "meter"
            assert set(data[REQUEST_METER_NAME]["rates"]) == {"rate1", "rate5", "rate15"}

    @pytest.mark.asyncio
    async def test_requests_are_metered(self, app):
        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as c:
            await c.get("/health")
            await c.get("/health")
            resp = await c.get(f"/api/metrics/{REQUEST_METER_NAME}")
            assert resp.status_code == 200
            data = resp.json()
            assert data["name"] == REQUEST_METER_NAME
            assert data["count"] == 2

    @pytest.mark.asyncio
    async def test_unknown_metric_404(self, app):
        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as c:
            resp = await c.get("/api/metrics/missing")
            assert resp.status_code == 404
            data = resp.json()
            assert data["code"] == "METRIC_NOT_FOUND"
            assert data["details"] == {"name": "missing"}


class TestRequestMeterMiddleware:
    @staticmethod
    def make_app(meter):
        app = FastAPI()
        app.add_middleware(RequestMeterMiddleware, meter=meter)

        @app.get("/ok")
        async def ok():
            return {"ok": True}

        @app.get("/boom")
        async def boom():
            raise RuntimeError("handler failed")

        return app

    @pytest.mark.asyncio
    async def test_marks_successful_request(self):
        meter = StdMeter()
        transport = ASGITransport(app=self.make_app(meter))
        async with AsyncClient(transport=transport, base_url="http://test") as c:
            resp = await c.get("/ok")
        assert resp.status_code == 200
        assert meter.count() == 1

    @pytest.mark.asyncio
    async def test_marks_request_whose_handler_raised(self):
        meter = StdMeter()
        transport = ASGITransport(app=self.make_app(meter), raise_app_exceptions=False)
        async with AsyncClient(transport=transport, base_url="http://test") as c:
            resp = await c.get("/boom")
            assert resp.status_code == 500
            await c.get("/ok")
        assert meter.count() == 2
