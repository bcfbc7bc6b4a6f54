# Copyright (c) 2026 TempoOS Contributors. All Rights Reserved.

"""
Metrics Configuration — Environment-driven settings.

All configuration is loaded from environment variables (or .env file).
"""

from __future__ import annotations

from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings


class MetricsSettings(BaseSettings):
    """Reporter and meter configuration loaded from environment."""

    # --- Identity ---
    APP_NAME: str = Field(
        default="tempo",
        description="Application name reported as the reporter name",
    )
    METRIC_PREFIX: str = Field(
        default="tempo",
        description="Namespace prepended to every metric path on the wire",
    )

    # --- Carbon ---
    CARBON_ADDRESS: str = Field(
        default="localhost:2003",
        description="Carbon plaintext listener, host:port",
    )
    MAX_BATCH_BYTES: int = Field(
        default=1024,
        gt=0,
        description="Upper bound on a single flush to the carbon socket",
    )
    SOCKET_TIMEOUT: float = Field(
        default=5.0,
        gt=0,
        description="Connect/write timeout in seconds; expiry counts as a write failure",
    )

    # --- Cadence ---
    TICK_INTERVAL: float = Field(
        default=5.0,
        gt=0,
        description="Meter decay tick interval in seconds",
    )
    REPORT_INTERVAL: float = Field(
        default=10.0,
        gt=0,
        description="Seconds between report cycles",
    )
    METER_WINDOWS: List[float] = Field(
        default=[1.0, 5.0, 15.0],
        description="Meter moving-average windows in minutes",
    )

    # --- Platform ---
    LOG_LEVEL: str = Field(default="INFO")

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": True,
    }


# Global singleton
settings = MetricsSettings()
