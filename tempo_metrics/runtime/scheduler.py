# Copyright (c) 2026 TempoOS Contributors. All Rights Reserved.

"""
ReportScheduler — Drives meter ticks and report cycles.

Two MetricsClocks run side by side:
  - the tick clock calls registry.tick_meters() every tick_interval,
  - the report clock runs reporter.report() in a worker thread every
    report_interval, so the blocking socket write never stalls the loop.

A failed report cycle is logged and counted. The next cycle retries.
stop() waits for a cycle already in its worker thread before closing
the reporter.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Optional

from tempo_metrics.core.errors import MetricsError
from tempo_metrics.kernel.clock import MetricsClock
from tempo_metrics.kernel.registry import MetricRegistry
from tempo_metrics.reporter.base import Reporter

logger = logging.getLogger("tempo.metrics.scheduler")


class ReportScheduler:

    def __init__(
        self,
        reporter: Reporter,
        registry: MetricRegistry,
        tick_interval: float = 5.0,
        report_interval: float = 10.0,
    ) -> None:
        self._reporter = reporter
        self._registry = registry
        self._tick_clock = MetricsClock(tick_interval, name="tick")
        self._report_clock = MetricsClock(report_interval, name="report")
        self._tick_clock.on_tick(self._on_tick)
        self._report_clock.on_tick(self._on_report)
        self.reports_sent: int = 0
        self.failed_reports: int = 0
        self._inflight: Optional[asyncio.Future] = None

    @property
    def running(self) -> bool:
        return self._tick_clock.running and self._report_clock.running

    async def _on_tick(self, tick: int) -> None:
        self._registry.tick_meters()

    async def _on_report(self, tick: int) -> None:
        await self.report_once()

    async def _run_cycle(self) -> bool:
        try:
            lines = await asyncio.to_thread(self._reporter.report)
        except MetricsError as exc:
            self.failed_reports += 1
            logger.warning(
                "Report cycle failed [%s]: %s", exc.code, exc.message,
                extra={"reporter": self._reporter.name, "lines": exc.details.get("sent_lines")},
            )
            return False
        self.reports_sent += 1
        logger.debug(
            "Report cycle %d sent %d lines", self.reports_sent, lines,
            extra={"reporter": self._reporter.name, "cycle": self.reports_sent, "lines": lines},
        )
        return True

    async def report_once(self) -> bool:
        """Run one report cycle off the event loop. Returns True on success."""
        # Cancelling the report clock must not orphan the worker thread
        self._inflight = asyncio.ensure_future(self._run_cycle())
        return await asyncio.shield(self._inflight)

    async def start(self) -> None:
        await self._tick_clock.start()
        await self._report_clock.start()

    async def stop(self) -> None:
        """Stop both clocks, let an in-flight cycle finish, then close the reporter."""
        await self._report_clock.stop()
        await self._tick_clock.stop()
        if self._inflight is not None and not self._inflight.done():
            await self._inflight
        self._inflight = None
        await asyncio.to_thread(self._reporter.close)
