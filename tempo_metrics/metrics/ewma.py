# Copyright (c) 2026 TempoOS Contributors. All Rights Reserved.

"""
EWMA — Exponentially-weighted moving average of an event rate.

Modelled on the Unix load average: events accumulate between ticks, and
each tick folds the instantaneous rate into the running estimate with a
fixed smoothing factor derived from the window length.

The engine has no timer of its own. Window semantics only hold if the
owner calls tick() every `tick_interval` seconds.
"""

from __future__ import annotations

import math


class EWMA:
    """Decaying rate estimate for one window."""

    def __init__(self, window_minutes: float, tick_interval: float = 5.0) -> None:
        """
        Args:
            window_minutes: Averaging window in minutes (1, 5, 15 ...).
            tick_interval: Seconds between tick() calls.
        """
        if window_minutes <= 0:
            raise ValueError(f"window_minutes must be positive, got {window_minutes}")
        if tick_interval <= 0:
            raise ValueError(f"tick_interval must be positive, got {tick_interval}")
        self._window = float(window_minutes)
        self._interval = float(tick_interval)
        self._alpha = 1.0 - math.exp(-self._interval / (self._window * 60.0))
        self._rate: float = 0.0
        self._uncounted: int = 0
        self._initialized: bool = False

    @classmethod
    def one_minute(cls, tick_interval: float = 5.0) -> EWMA:
        return cls(1.0, tick_interval)

    @classmethod
    def five_minute(cls, tick_interval: float = 5.0) -> EWMA:
        return cls(5.0, tick_interval)

    @classmethod
    def fifteen_minute(cls, tick_interval: float = 5.0) -> EWMA:
        return cls(15.0, tick_interval)

    @property
    def window(self) -> float:
        return self._window

    @property
    def tick_interval(self) -> float:
        return self._interval

    @property
    def alpha(self) -> float:
        return self._alpha

    @property
    def initialized(self) -> bool:
        return self._initialized

    def update(self, n: int) -> None:
        """Add n events observed since the last tick."""
        self._uncounted += n

    def tick(self) -> None:
        """Fold the pending events into the decayed rate."""
        instant_rate = self._uncounted / self._interval
        self._uncounted = 0
        if self._initialized:
            self._rate += self._alpha * (instant_rate - self._rate)
        else:
            # First tick seeds the average instead of decaying up from zero
            self._rate = instant_rate
            self._initialized = True

    def rate(self) -> float:
        """Current estimate in events per minute."""
        return self._rate * 60.0

    def __repr__(self) -> str:
        return f"EWMA(window={self._window:g}m, rate={self.rate():.4f}/min)"
