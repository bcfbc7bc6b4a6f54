# Copyright (c) 2026 TempoOS Contributors. All Rights Reserved.

"""
Metric / Meter — Abstract base classes for all exportable metrics.

Every metric implements export_metric() and returns one of the
ExportedValue variants. Reporters and the API only ever see that value.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Tuple

from tempo_metrics.protocols.values import ExportedValue, MeterSnapshot


class Metric(ABC):
    """Anything a reporter can serialize."""

    @abstractmethod
    def export_metric(self) -> ExportedValue:
        """Return the current observable state as an immutable value."""
        ...


class Meter(Metric):
    """
    A rate/count metric over a fixed set of decay windows.

    mark() is called by application threads; tick() by a scheduler on a
    fixed cadence. Reads never block on anything but the instance lock.
    """

    @property
    @abstractmethod
    def windows(self) -> Tuple[float, ...]:
        ...

    @abstractmethod
    def mark(self, n: int = 1) -> None:
        ...

    @abstractmethod
    def tick(self) -> None:
        ...

    @abstractmethod
    def rate(self, window: float, strict: bool = False) -> float:
        ...

    @abstractmethod
    def mean(self) -> float:
        ...

    @abstractmethod
    def count(self) -> int:
        ...

    @abstractmethod
    def snapshot(self) -> MeterSnapshot:
        ...

    def export_metric(self) -> MeterSnapshot:
        return self.snapshot()
