# Copyright (c) 2026 TempoOS Contributors. All Rights Reserved.
"""Unit tests for the EWMA decay engine."""

import math

import pytest
from tempo_metrics.metrics.ewma import EWMA


class TestEWMA:
    def test_alpha_from_window_and_interval(self):
        e = EWMA(1.0, 5.0)
        assert e.alpha == pytest.approx(1 - math.exp(-5.0 / 60.0))

    def test_longer_window_smaller_alpha(self):
        assert EWMA.fifteen_minute().alpha < EWMA.five_minute().alpha < EWMA.one_minute().alpha

    def test_rate_zero_before_first_tick(self):
        e = EWMA.one_minute()
        e.update(100)
        assert e.rate() == 0.0
        assert e.initialized is False

    def test_first_tick_seeds_rate(self):
        e = EWMA.one_minute()
        e.update(300)
        e.tick()
        # 300 events / 5s = 60/s = 3600/min
        assert e.rate() == pytest.approx(3600.0)
        assert e.initialized is True

    def test_update_accumulates_until_tick(self):
        e = EWMA.five_minute()
        e.update(10)
        e.update(15)
        e.tick()
        assert e.rate() == pytest.approx(25 / 5.0 * 60)

    def test_pending_count_resets_each_tick(self):
        e = EWMA.one_minute()
        e.update(50)
        e.tick()
        first = e.rate()
        e.update(50)
        e.tick()
        # Same instantaneous rate again, so the average holds steady
        assert e.rate() == pytest.approx(first)

    def test_idle_ticks_decay_geometrically(self):
        e = EWMA(1.0, 5.0)
        e.update(60)
        e.tick()
        start = e.rate()
        for i in range(1, 6):
            e.tick()
            assert e.rate() == pytest.approx(start * (1 - e.alpha) ** i)

    def test_rate_moves_toward_new_instant_rate(self):
        e = EWMA(1.0, 5.0)
        e.update(5)
        e.tick()  # 1/s
        e.update(50)
        e.tick()  # instant 10/s
        expected = 1.0 + e.alpha * (10.0 - 1.0)
        assert e.rate() == pytest.approx(expected * 60)

    def test_rate_never_negative(self):
        e = EWMA.one_minute()
        e.update(1)
        for _ in range(500):
            e.tick()
        assert e.rate() >= 0.0

    def test_invalid_window_raises(self):
        with pytest.raises(ValueError):
            EWMA(0, 5.0)

    def test_invalid_interval_raises(self):
        with pytest.raises(ValueError):
            EWMA(1.0, -1)
