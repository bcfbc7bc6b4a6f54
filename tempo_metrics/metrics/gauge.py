# Copyright (c) 2026 TempoOS Contributors. All Rights Reserved.

"""StdGauge — Last-written value."""

from __future__ import annotations

import threading
from typing import Union

from tempo_metrics.metrics.base import Metric
from tempo_metrics.protocols.values import GaugeValue


class StdGauge(Metric):

    def __init__(self, value: Union[int, float] = 0) -> None:
        self._value = value
        self._lock = threading.Lock()

    def set(self, value: Union[int, float]) -> None:
        with self._lock:
            self._value = value

    def value(self) -> Union[int, float]:
        with self._lock:
            return self._value

    def export_metric(self) -> GaugeValue:
        return GaugeValue(self.value())
