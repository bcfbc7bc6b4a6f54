# Copyright (c) 2026 TempoOS Contributors. All Rights Reserved.

"""
MetricsClock — Fixed-interval heartbeat for meter ticks and report cycles.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Callable, Coroutine, Optional

logger = logging.getLogger("tempo.metrics.clock")


class MetricsClock:
    """
    Emits numbered ticks every `interval` seconds to async callbacks.

    One clock drives the EWMA decay cadence, another the report cadence.
    """

    def __init__(self, interval: float = 5.0, name: str = "clock") -> None:
        """
        Args:
            interval: Tick interval in seconds.
            name: Label used in log lines.
        """
        if interval <= 0:
            raise ValueError(f"interval must be positive, got {interval}")
        self._interval = interval
        self._name = name
        self._tick: int = 0
        self._running: bool = False
        self._task: Optional[asyncio.Task] = None
        self._callbacks: list[Callable[[int], Coroutine[Any, Any, None]]] = []

    @property
    def tick(self) -> int:
        """Current tick number."""
        return self._tick

    @property
    def interval(self) -> float:
        return self._interval

    @property
    def running(self) -> bool:
        return self._running

    def on_tick(self, callback: Callable[[int], Coroutine[Any, Any, None]]) -> None:
        """Register an async callback to be invoked on each tick."""
        self._callbacks.append(callback)

    async def start(self) -> None:
        if self._running:
            return
        self._running = True
        self._task = asyncio.create_task(self._loop())
        logger.info("MetricsClock[%s] started (interval=%.2fs)", self._name, self._interval)

    async def _loop(self) -> None:
        # Sleep first: the first tick lands one full interval after start
        while self._running:
            await asyncio.sleep(self._interval)
            self._tick += 1
            for cb in self._callbacks:
                try:
                    await cb(self._tick)
                except Exception as exc:
                    logger.error(
                        "MetricsClock[%s] callback error at tick %d: %s",
                        self._name, self._tick, exc,
                    )

    async def stop(self) -> None:
        self._running = False
        if self._task:
            self._task.cancel()
            try:
                await self._task
            except asyncio.CancelledError:
                pass
            self._task = None
        logger.info("MetricsClock[%s] stopped at tick %d", self._name, self._tick)
