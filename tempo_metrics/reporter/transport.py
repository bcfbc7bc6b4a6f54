# Copyright (c) 2026 TempoOS Contributors. All Rights Reserved.

"""
Carbon Transport — Stream socket to the carbon plaintext listener.

Two states only:

    DISCONNECTED --connect() ok--> CONNECTED
    CONNECTED    --send() fails--> DISCONNECTED

There is no retry here. A failed connect or write is raised to the
reporter, and the next report cycle reconnects.
"""

from __future__ import annotations

import logging
import socket
from enum import Enum
from typing import Any, Callable, Optional, Tuple

from tempo_metrics.core.errors import CarbonConnectionError, CarbonWriteError

logger = logging.getLogger("tempo.metrics.transport")

Connector = Callable[..., Any]


class TransportState(str, Enum):
    DISCONNECTED = "disconnected"
    CONNECTED = "connected"


def parse_address(address: str) -> Tuple[str, int]:
    """Split 'host:port' into (host, port)."""
    host, sep, port = address.rpartition(":")
    if not sep or not host or not port.isdigit():
        raise ValueError(f"Invalid carbon address '{address}', expected host:port")
    return host, int(port)


class CarbonTransport:
    """Owns at most one socket to carbon."""

    def __init__(
        self,
        address: str,
        timeout: float = 5.0,
        connector: Connector = socket.create_connection,
    ) -> None:
        """
        Args:
            address: Carbon listener as host:port.
            timeout: Connect and write timeout in seconds.
            connector: socket.create_connection-compatible factory.
        """
        self._address = address
        self._host, self._port = parse_address(address)
        self._timeout = timeout
        self._connector = connector
        self._sock: Optional[Any] = None
        self._state = TransportState.DISCONNECTED

    @property
    def address(self) -> str:
        return self._address

    @property
    def state(self) -> TransportState:
        return self._state

    @property
    def connected(self) -> bool:
        return self._state is TransportState.CONNECTED

    def connect(self) -> None:
        """Open the socket if not already connected."""
        if self.connected:
            return
        try:
            self._sock = self._connector((self._host, self._port), timeout=self._timeout)
        except OSError as exc:
            self._sock = None
            logger.warning(
                "Carbon connect failed: %s", exc, extra={"address": self._address},
            )
            raise CarbonConnectionError(self._address, str(exc)) from exc
        self._state = TransportState.CONNECTED
        logger.info("Connected to carbon", extra={"address": self._address})

    def send(self, data: bytes) -> None:
        """Write the whole buffer or fail and drop the connection."""
        if not self.connected:
            raise CarbonWriteError(self._address, "transport is not connected")
        try:
            self._sock.sendall(data)
        except OSError as exc:
            logger.warning(
                "Carbon write failed: %s", exc, extra={"address": self._address},
            )
            self.close()
            raise CarbonWriteError(self._address, str(exc)) from exc

    def close(self) -> None:
        sock, self._sock = self._sock, None
        self._state = TransportState.DISCONNECTED
        if sock is None:
            return
        try:
            sock.close()
        except OSError as exc:
            logger.debug("Ignoring error on socket close: %s", exc)
