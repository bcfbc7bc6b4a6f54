# Copyright (c) 2026 TempoOS Contributors. All Rights Reserved.

"""
StdMeter — Thread-safe rate meter over a fixed set of decay windows.

Holds one EWMA per window (1/5/15 minutes by default), an all-time count
and a cached MeterSnapshot that is rebuilt on every mark() and tick().
Every read and write goes through one per-instance lock; there is no
shared lock between meters.
"""

from __future__ import annotations

import threading
import time
from typing import Callable, Sequence, Tuple

from tempo_metrics.core.errors import UnknownWindowError
from tempo_metrics.metrics.base import Meter
from tempo_metrics.metrics.ewma import EWMA
from tempo_metrics.protocols.values import MeterSnapshot

DEFAULT_WINDOWS: Tuple[float, ...] = (1.0, 5.0, 15.0)
DEFAULT_TICK_INTERVAL = 5.0

# Elapsed time is floored here before dividing for the mean rate
MIN_ELAPSED_SECONDS = 1.0


class StdMeter(Meter):
    """Default Meter implementation."""

    def __init__(
        self,
        windows: Sequence[float] = DEFAULT_WINDOWS,
        tick_interval: float = DEFAULT_TICK_INTERVAL,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        """
        Args:
            windows: Moving-average windows in minutes.
            tick_interval: Seconds between tick() calls made by the scheduler.
            clock: Monotonic seconds source, used for the mean rate.
        """
        if not windows:
            raise ValueError("StdMeter needs at least one window")
        self._windows: Tuple[float, ...] = tuple(float(w) for w in windows)
        self._ewmas: Tuple[EWMA, ...] = tuple(
            EWMA(w, tick_interval) for w in self._windows
        )
        self._clock = clock
        self._start = clock()
        self._lock = threading.Lock()
        self._snapshot = MeterSnapshot(
            count=0,
            rates=tuple(0.0 for _ in self._windows),
            mean=0.0,
            windows=self._windows,
        )

    @property
    def windows(self) -> Tuple[float, ...]:
        return self._windows

    # ── Mutation ────────────────────────────────────────────────

    def mark(self, n: int = 1) -> None:
        """Record n events. n must be non-negative."""
        with self._lock:
            for ewma in self._ewmas:
                ewma.update(n)
            self._refresh(self._snapshot.count + n)

    def tick(self) -> None:
        """Advance every window by one tick interval."""
        with self._lock:
            for ewma in self._ewmas:
                ewma.tick()
            self._refresh(self._snapshot.count)

    def _refresh(self, count: int) -> None:
        # Caller holds self._lock
        elapsed = max(self._clock() - self._start, MIN_ELAPSED_SECONDS)
        self._snapshot = MeterSnapshot(
            count=count,
            rates=tuple(ewma.rate() for ewma in self._ewmas),
            mean=count / elapsed,
            windows=self._windows,
        )

    # ── Reads ───────────────────────────────────────────────────

    def rate(self, window: float, strict: bool = False) -> float:
        """
        Decayed rate (events/minute) for a configured window.

        Unknown windows return 0.0, or raise UnknownWindowError when
        strict is set.
        """
        with self._lock:
            snap = self._snapshot
        if window in self._windows:
            return snap.rates[self._windows.index(window)]
        if strict:
            raise UnknownWindowError(window, self._windows)
        return 0.0

    def mean(self) -> float:
        with self._lock:
            return self._snapshot.mean

    def count(self) -> int:
        with self._lock:
            return self._snapshot.count

    def snapshot(self) -> MeterSnapshot:
        """Immutable copy of count, rates and mean taken under the lock."""
        with self._lock:
            return self._snapshot

    def __repr__(self) -> str:
        snap = self.snapshot()
        return f"StdMeter(count={snap.count}, rates={snap.rates}, mean={snap.mean:.4f})"
