# Copyright (c) 2026 TempoOS Contributors. All Rights Reserved.

"""
Metric Registry — Named, thread-safe home for every live metric.

The registry holds the owning reference to each metric; producers keep
their own handle and only ever call mark()/inc()/set() on it. Reporters
and the scheduler enumerate a copy taken under the lock, so concurrent
register/unregister calls never expose a half-inserted entry.
"""

from __future__ import annotations

import logging
import threading
from typing import Dict, List, Optional, Tuple

from tempo_metrics.core.errors import DuplicateNameError
from tempo_metrics.metrics.base import Meter, Metric

logger = logging.getLogger("tempo.metrics.registry")


class MetricRegistry:
    """Central name -> metric map."""

    def __init__(self) -> None:
        self._metrics: Dict[str, Metric] = {}
        self._lock = threading.Lock()

    # ── Registration ────────────────────────────────────────────

    def register(self, name: str, metric: Metric) -> Metric:
        """
        Register a metric under a unique name.

        Raises DuplicateNameError if the name is taken; the existing
        entry is left as it was.
        """
        with self._lock:
            if name in self._metrics:
                raise DuplicateNameError(name)
            self._metrics[name] = metric
        logger.info(
            "Registered metric: %s (%s)", name, type(metric).__name__, extra={"metric": name},
        )
        return metric

    def unregister(self, name: str) -> bool:
        with self._lock:
            removed = self._metrics.pop(name, None)
        if removed is None:
            return False
        logger.info("Unregistered metric: %s", name, extra={"metric": name})
        return True

    def clear(self) -> None:
        with self._lock:
            self._metrics.clear()

    # ── Lookup ──────────────────────────────────────────────────

    def get(self, name: str) -> Optional[Metric]:
        with self._lock:
            return self._metrics.get(name)

    def names(self) -> List[str]:
        with self._lock:
            return list(self._metrics.keys())

    def items(self) -> List[Tuple[str, Metric]]:
        """Point-in-time copy of all entries, in registration order."""
        with self._lock:
            return list(self._metrics.items())

    def meters(self) -> List[Tuple[str, Meter]]:
        return [(n, m) for n, m in self.items() if isinstance(m, Meter)]

    # ── Scheduling ──────────────────────────────────────────────

    def tick_meters(self) -> int:
        """Tick every registered meter once. Returns how many were ticked."""
        meters = self.meters()
        for _, meter in meters:
            meter.tick()
        return len(meters)

    def __contains__(self, name: str) -> bool:
        with self._lock:
            return name in self._metrics

    def __len__(self) -> int:
        with self._lock:
            return len(self._metrics)


# Global singleton
default_registry = MetricRegistry()
