# Copyright (c) 2026 TempoOS Contributors. All Rights Reserved.

"""
tempo-metrics — In-process meters, counters, gauges and histograms,
reported to Graphite/Carbon over the plaintext line protocol.

    meter = StdMeter()
    reporter = CarbonReporter("api", "carbon:2003", "tempo.api", 1024)
    reporter.add("requests", meter)

    meter.mark()           # application threads
    meter.tick()           # every 5s, from a scheduler
    reporter.report()      # on the report cadence
"""

__version__ = "0.1.0"

from tempo_metrics.core.errors import (
    CarbonConnectionError,
    CarbonWriteError,
    DuplicateNameError,
    MetricsError,
    UnknownWindowError,
)
from tempo_metrics.kernel.registry import MetricRegistry, default_registry
from tempo_metrics.metrics.base import Meter, Metric
from tempo_metrics.metrics.counter import StdCounter
from tempo_metrics.metrics.ewma import EWMA
from tempo_metrics.metrics.gauge import StdGauge
from tempo_metrics.metrics.histogram import StdHistogram
from tempo_metrics.metrics.meter import StdMeter
from tempo_metrics.protocols.values import (
    CounterValue,
    ExportedValue,
    GaugeValue,
    HistogramSnapshot,
    MeterSnapshot,
)
from tempo_metrics.reporter.carbon import CarbonReporter

__all__ = [
    "__version__",
    "CarbonConnectionError",
    "CarbonReporter",
    "CarbonWriteError",
    "CounterValue",
    "DuplicateNameError",
    "EWMA",
    "ExportedValue",
    "GaugeValue",
    "HistogramSnapshot",
    "Meter",
    "MeterSnapshot",
    "Metric",
    "MetricRegistry",
    "MetricsError",
    "StdCounter",
    "StdGauge",
    "StdHistogram",
    "StdMeter",
    "UnknownWindowError",
    "default_registry",
]
