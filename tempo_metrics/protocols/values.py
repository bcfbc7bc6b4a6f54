# Copyright (c) 2026 TempoOS Contributors. All Rights Reserved.

"""
Exported Values — The closed set of shapes a metric can export.

Every metric hands the reporter one of these immutable values:

    CounterValue       raw counter total
    GaugeValue         last gauge reading
    MeterSnapshot      count, decayed rates and mean of a rate meter
    HistogramSnapshot  count, extremes, mean and percentiles

Each variant knows how to flatten itself into named numeric facets, so the
reporter and the API never branch on the concrete metric type.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, List, Tuple, Union

Number = Union[int, float]
Facet = Tuple[str, Number]


def window_facet(window: float) -> str:
    """Facet name for a meter window: 1.0 -> 'rate1', 0.5 -> 'rate0_5'."""
    return "rate" + f"{window:g}".replace(".", "_")


@dataclass(frozen=True)
class CounterValue:
    value: int

    def facets(self) -> List[Facet]:
        return [("", self.value)]

    def to_dict(self) -> Dict[str, Any]:
        return {"type": "counter", "value": self.value}


@dataclass(frozen=True)
class GaugeValue:
    value: Number

    def facets(self) -> List[Facet]:
        return [("", self.value)]

    def to_dict(self) -> Dict[str, Any]:
        return {"type": "gauge", "value": self.value}


@dataclass(frozen=True)
class MeterSnapshot:
    """
    Point-in-time copy of a rate meter.

    `rates` are events per minute and line up positionally with `windows`
    (minutes). `mean` is events per second since the meter was created.
    """

    count: int = 0
    rates: Tuple[float, ...] = (0.0, 0.0, 0.0)
    mean: float = 0.0
    windows: Tuple[float, ...] = (1.0, 5.0, 15.0)

    def rate(self, window: float) -> float:
        for w, r in zip(self.windows, self.rates):
            if w == window:
                return r
        return 0.0

    def facets(self) -> List[Facet]:
        result: List[Facet] = [("count", self.count)]
        for w, r in zip(self.windows, self.rates):
            result.append((window_facet(w), r))
        result.append(("mean", self.mean))
        return result

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": "meter",
            "count": self.count,
            "rates": {window_facet(w): r for w, r in zip(self.windows, self.rates)},
            "mean": self.mean,
        }


@dataclass(frozen=True)
class HistogramSnapshot:
    count: int = 0
    min: Number = 0
    max: Number = 0
    mean: float = 0.0
    p50: Number = 0
    p75: Number = 0
    p90: Number = 0
    p95: Number = 0
    p99: Number = 0
    p999: Number = 0

    def facets(self) -> List[Facet]:
        return list(asdict(self).items())

    def to_dict(self) -> Dict[str, Any]:
        return {"type": "histogram", **asdict(self)}


ExportedValue = Union[CounterValue, GaugeValue, MeterSnapshot, HistogramSnapshot]
