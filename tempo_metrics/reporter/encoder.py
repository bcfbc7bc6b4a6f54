# Copyright (c) 2026 TempoOS Contributors. All Rights Reserved.

"""
Carbon line encoder.

One record per line:

    <prefix>.<name>[.<facet>] <value> <unix_seconds>\\n

Empty path segments are dropped, so a counter exported with facet ""
becomes `prefix.name 5 1700000000`.
"""

from __future__ import annotations

import logging
import math
from decimal import Decimal
from typing import List, Union

from tempo_metrics.protocols.values import ExportedValue

logger = logging.getLogger("tempo.metrics.encoder")

Number = Union[int, float]


def join_path(*segments: str) -> str:
    return ".".join(s for s in segments if s)


def format_value(value: Number) -> str:
    """Render a number in plain decimal notation, never scientific."""
    if isinstance(value, bool):
        return str(int(value))
    if isinstance(value, int):
        return str(value)
    # repr() gives the shortest round-trip digits; Decimal drops the exponent
    return format(Decimal(repr(float(value))), "f")


def encode_line(
    prefix: str,
    name: str,
    facet: str,
    value: Number,
    timestamp: int,
) -> str:
    return f"{join_path(prefix, name, facet)} {format_value(value)} {int(timestamp)}\n"


def encode_metric(path: str, value: ExportedValue, timestamp: int) -> List[str]:
    """Flatten an exported value into one line per facet."""
    lines = []
    for facet, number in value.facets():
        if isinstance(number, float) and not math.isfinite(number):
            logger.debug(
                "Skipping non-finite facet %s.%s=%r", path, facet, number,
                extra={"metric": path},
            )
            continue
        lines.append(encode_line("", path, facet, number, timestamp))
    return lines
