# Copyright (c) 2026 TempoOS Contributors. All Rights Reserved.

"""
CarbonReporter — Serializes registered metrics to Graphite/Carbon.

Each report() walks the registry, asks every metric for its exported
value, flattens it into facet lines and flushes them in batches of at
most `max_batch_bytes`. A connect or write failure ends the cycle and
propagates; the next scheduled report() is the retry.
"""

from __future__ import annotations

import logging
import threading
import time
from typing import Callable, Optional

from tempo_metrics.core.errors import CarbonWriteError
from tempo_metrics.kernel.registry import MetricRegistry
from tempo_metrics.metrics.base import Metric
from tempo_metrics.reporter.base import Reporter
from tempo_metrics.reporter.encoder import encode_metric, join_path
from tempo_metrics.reporter.transport import CarbonTransport

logger = logging.getLogger("tempo.metrics.reporter")


class CarbonReporter(Reporter):
    """Plaintext-protocol reporter bound to one carbon address and prefix."""

    def __init__(
        self,
        application_name: str,
        address: str,
        prefix: str,
        max_batch_bytes: int,
        transport: Optional[CarbonTransport] = None,
        registry: Optional[MetricRegistry] = None,
        clock: Callable[[], float] = time.time,
    ) -> None:
        """
        Args:
            application_name: Reporter name, used in logs.
            address: Carbon listener as host:port. When a transport is
                passed, must be empty or equal to the transport's address.
            prefix: Namespace prepended to every metric path.
            max_batch_bytes: Largest buffer handed to a single socket write.
            transport: Pre-built transport; defaults to a CarbonTransport on `address`.
            registry: Registry to report from; defaults to a private one.
            clock: Wall-clock seconds source for line timestamps.

        No connection is opened until the first report().
        """
        if max_batch_bytes <= 0:
            raise ValueError(f"max_batch_bytes must be positive, got {max_batch_bytes}")
        if transport is not None and address and address != transport.address:
            raise ValueError(
                f"address '{address}' does not match transport address '{transport.address}'"
            )
        self.name = application_name
        self._prefix = prefix
        self._max_batch_bytes = max_batch_bytes
        self._transport = transport or CarbonTransport(address)
        self._registry = registry if registry is not None else MetricRegistry()
        self._clock = clock
        self._cycle_lock = threading.Lock()

    @property
    def prefix(self) -> str:
        return self._prefix

    @property
    def registry(self) -> MetricRegistry:
        return self._registry

    @property
    def transport(self) -> CarbonTransport:
        return self._transport

    # ── Registration ────────────────────────────────────────────

    def add(self, name: str, metric: Metric) -> None:
        """Register metric as `prefix.name`. Raises DuplicateNameError on reuse."""
        self._registry.register(name, metric)

    def remove(self, name: str) -> bool:
        return self._registry.unregister(name)

    def path(self, name: str) -> str:
        return join_path(self._prefix, name)

    # ── Reporting ───────────────────────────────────────────────

    def report(self) -> int:
        """
        Export, encode and send every registered metric once.

        Returns the number of lines written. Raises CarbonConnectionError
        if carbon is unreachable and CarbonWriteError if a flush fails;
        lines flushed before the failure are not resent.
        """
        with self._cycle_lock:
            timestamp = int(self._clock())
            self._transport.connect()

            buffer = bytearray()
            buffered = 0
            sent = 0
            try:
                for name, metric in self._registry.items():
                    lines = encode_metric(self.path(name), metric.export_metric(), timestamp)
                    for line in lines:
                        data = line.encode("utf-8")
                        if buffer and len(buffer) + len(data) > self._max_batch_bytes:
                            self._transport.send(bytes(buffer))
                            sent += buffered
                            buffer.clear()
                            buffered = 0
                        buffer += data
                        buffered += 1
                if buffer:
                    self._transport.send(bytes(buffer))
                    sent += buffered
            except CarbonWriteError as exc:
                exc.details["sent_lines"] = sent
                raise

        logger.debug(
            "Report cycle sent %d lines", sent,
            extra={"reporter": self.name, "address": self._transport.address, "lines": sent},
        )
        return sent

    def close(self) -> None:
        """Close the transport once any in-flight cycle has finished."""
        with self._cycle_lock:
            self._transport.close()

    def __enter__(self) -> CarbonReporter:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
