# Copyright (c) 2026 TempoOS Contributors. All Rights Reserved.

"""
Metrics Errors — Unified error structure for registry and reporter failures.

Meter operations never raise. Everything here surfaces from registration
or from a report cycle and is handed back to the caller untouched.
"""

from __future__ import annotations

from typing import Any, Dict, Optional


class MetricsError(Exception):
    """Base error with a stable code and structured details."""

    def __init__(
        self,
        code: str,
        message: str,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "code": self.code,
            "message": self.message,
            "details": self.details,
        }


class CarbonConnectionError(MetricsError):
    def __init__(self, address: str, reason: str = ""):
        super().__init__(
            code="CONNECTION_FAILED",
            message=f"Could not connect to carbon at '{address}': {reason}",
            details={"address": address},
        )


class CarbonWriteError(MetricsError):
    def __init__(self, address: str, reason: str = "", sent_lines: int = 0):
        super().__init__(
            code="WRITE_FAILED",
            message=f"Write to carbon at '{address}' failed: {reason}",
            details={"address": address, "sent_lines": sent_lines},
        )


class DuplicateNameError(MetricsError):
    def __init__(self, name: str):
        super().__init__(
            code="DUPLICATE_NAME",
            message=f"Metric '{name}' is already registered",
            details={"name": name},
        )


class UnknownWindowError(MetricsError):
    def __init__(self, window: float, windows: tuple):
        super().__init__(
            code="UNKNOWN_WINDOW",
            message=f"No rate window {window:g} (configured: {list(windows)})",
            details={"window": window, "windows": list(windows)},
        )
