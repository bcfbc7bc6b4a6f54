# Copyright (c) 2026 TempoOS Contributors. All Rights Reserved.

"""
Shared test fixtures for all tempo-metrics tests.
"""

import pytest

from tempo_metrics.kernel.registry import MetricRegistry


class ManualClock:
    """Clock that only moves when told to."""

    def __init__(self, now: float = 1000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class FakeSocket:
    """Records sendall() payloads; raises after `fail_after` successful writes."""

    def __init__(self, fail_after=None):
        self.sent = []
        self.closed = False
        self._fail_after = fail_after

    def sendall(self, data):
        if self._fail_after is not None and len(self.sent) >= self._fail_after:
            raise BrokenPipeError("broken pipe")
        self.sent.append(bytes(data))

    def close(self):
        self.closed = True


class FakeConnector:
    """Stand-in for socket.create_connection."""

    def __init__(self):
        self.calls = []
        self.sockets = []
        self.refuse = False
        self.fail_after = None

    def __call__(self, address, timeout=None):
        self.calls.append((address, timeout))
        if self.refuse:
            raise ConnectionRefusedError("connection refused")
        sock = FakeSocket(self.fail_after)
        self.sockets.append(sock)
        return sock

    @property
    def sent(self):
        return [data for sock in self.sockets for data in sock.sent]


@pytest.fixture
def manual_clock() -> ManualClock:
    return ManualClock()


@pytest.fixture
def fake_connector() -> FakeConnector:
    return FakeConnector()


@pytest.fixture
def registry() -> MetricRegistry:
    """Provide a fresh, empty registry."""
    return MetricRegistry()
