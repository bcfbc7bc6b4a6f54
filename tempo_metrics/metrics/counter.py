# Copyright (c) 2026 TempoOS Contributors. All Rights Reserved.

"""StdCounter — Lock-guarded integer counter."""

from __future__ import annotations

import threading

from tempo_metrics.metrics.base import Metric
from tempo_metrics.protocols.values import CounterValue


class StdCounter(Metric):

    def __init__(self) -> None:
        self._value: int = 0
        self._lock = threading.Lock()

    def inc(self, amount: int = 1) -> None:
        with self._lock:
            self._value += amount

    def dec(self, amount: int = 1) -> None:
        with self._lock:
            self._value -= amount

    def value(self) -> int:
        with self._lock:
            return self._value

    def clear(self) -> None:
        with self._lock:
            self._value = 0

    def export_metric(self) -> CounterValue:
        return CounterValue(self.value())
