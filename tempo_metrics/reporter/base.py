# Copyright (c) 2026 TempoOS Contributors. All Rights Reserved.

"""
Reporter — Abstract base for anything that ships metrics somewhere.

Reporters keep no timer; a scheduler calls report() on its own cadence.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class Reporter(ABC):

    name: str = ""

    @abstractmethod
    def report(self) -> int:
        """Run one reporting cycle. Returns the number of records sent."""
        ...

    def close(self) -> None:
        """Release any held resources."""
