# Copyright (c) 2026 TempoOS Contributors. All Rights Reserved.

"""
StdHistogram — Sliding sample of recent observations with percentiles.

Keeps the last `max_samples` values (older ones fall off the front) plus
an all-time count. Percentiles use the nearest-rank method over the
retained sample.
"""

from __future__ import annotations

import math
import threading
from collections import deque
from typing import Deque, List, Union

from tempo_metrics.metrics.base import Metric
from tempo_metrics.protocols.values import HistogramSnapshot

Number = Union[int, float]

DEFAULT_MAX_SAMPLES = 1028


def percentile(sorted_values: List[Number], q: float) -> Number:
    """Nearest-rank percentile, q in [0, 100]."""
    if not sorted_values:
        return 0
    rank = math.ceil(q / 100.0 * len(sorted_values))
    return sorted_values[max(rank, 1) - 1]


class StdHistogram(Metric):
    """Bounded histogram for latencies, sizes and similar distributions."""

    def __init__(self, max_samples: int = DEFAULT_MAX_SAMPLES) -> None:
        if max_samples <= 0:
            raise ValueError(f"max_samples must be positive, got {max_samples}")
        self._samples: Deque[Number] = deque(maxlen=max_samples)
        self._count: int = 0
        self._lock = threading.Lock()

    def record(self, value: Number) -> None:
        """Record one observation."""
        with self._lock:
            self._samples.append(value)
            self._count += 1

    def increment_by(self, value: Number, times: int) -> None:
        """Record the same observation `times` times."""
        if times < 0:
            raise ValueError(f"times must be non-negative, got {times}")
        with self._lock:
            # Only the last maxlen copies can survive in the sample
            self._samples.extend([value] * min(times, self._samples.maxlen))
            self._count += times

    def clear(self) -> None:
        with self._lock:
            self._samples.clear()
            self._count = 0

    def snapshot(self) -> HistogramSnapshot:
        with self._lock:
            values = sorted(self._samples)
            count = self._count
        if not values:
            return HistogramSnapshot(count=count)
        return HistogramSnapshot(
            count=count,
            min=values[0],
            max=values[-1],
            mean=sum(values) / len(values),
            p50=percentile(values, 50),
            p75=percentile(values, 75),
            p90=percentile(values, 90),
            p95=percentile(values, 95),
            p99=percentile(values, 99),
            p999=percentile(values, 99.9),
        )

    def export_metric(self) -> HistogramSnapshot:
        return self.snapshot()
