# Copyright (c) 2026 TempoOS Contributors. All Rights Reserved.

"""
Structured Logging — One JSON object per line.

Callers attach context through `extra=`:

    logger.info("Registered metric", extra={"metric": "api.requests"})

Only the keys in CONTEXT_FIELDS are copied into the output. A field set
to 0 is kept; None is dropped.
"""

from __future__ import annotations

import json
import logging
import sys
from typing import IO, Optional

# metric:   full metric path or registry name
# reporter: reporter name
# address:  carbon host:port
# lines:    lines written by a report cycle
# cycle:    report cycle number
CONTEXT_FIELDS = ("metric", "reporter", "address", "lines", "cycle")


class StructuredFormatter(logging.Formatter):
    """Render a LogRecord plus its metrics context as JSON."""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": self.formatTime(record),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        entry.update(
            (key, getattr(record, key))
            for key in CONTEXT_FIELDS
            if getattr(record, key, None) is not None
        )
        if record.exc_info and record.exc_info[0]:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, ensure_ascii=False, default=str)


def setup_logging(level: str = "INFO", stream: Optional[IO[str]] = None) -> logging.Handler:
    """
    Route all logging through one StructuredFormatter handler.

    Replaces whatever handlers the root logger had. Unknown level names
    fall back to INFO. Returns the installed handler.
    """
    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setFormatter(StructuredFormatter())

    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    root.handlers.clear()
    root.addHandler(handler)
    return handler
