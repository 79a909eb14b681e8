"""Logging setup for the server process.

Everything in ragblog logs through standard `logging` under the `ragblog.*`
hierarchy; this module only decides how those records are rendered.

Quick Start:
    >>> from ragblog.runtime.observability import configure_logging
    >>> configure_logging("DEBUG")               # human-readable, stderr
    >>> configure_logging("INFO", fmt="json")    # one JSON object per line
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import UTC, datetime
from typing import TextIO

ROOT_LOGGER = "ragblog"

_TEXT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


class JsonFormatter(logging.Formatter):
    """JSON Lines output for log aggregation."""

    def format(self, record: logging.LogRecord) -> str:
        data: dict[str, object] = {
            "timestamp": datetime.fromtimestamp(record.created, UTC).isoformat(),
            "level": record.levelname.lower(),
            "logger": record.name,
            "event": record.getMessage(),
        }
        if record.exc_info:
            data["exception"] = self.formatException(record.exc_info)
        return json.dumps(data, default=str)


def configure_logging(level: str = "INFO", fmt: str = "text", *, output: TextIO | None = None) -> logging.Logger:
    """Attach a single stream handler to the `ragblog` logger.

    Calling again replaces the previous handler, so the CLI and tests can both
    configure without stacking duplicate output.

    Raises:
        ValueError: unknown format
    """
    if fmt == "text":
        formatter: logging.Formatter = logging.Formatter(_TEXT_FORMAT)
    elif fmt == "json":
        formatter = JsonFormatter()
    else:
        raise ValueError(f"Unknown log format: {fmt}. Use 'text' or 'json'")

    handler = logging.StreamHandler(output or sys.stderr)
    handler.setFormatter(formatter)

    log = logging.getLogger(ROOT_LOGGER)
    for old in list(log.handlers):
        log.removeHandler(old)
    log.addHandler(handler)
    log.setLevel(getattr(logging, level.upper(), logging.INFO))
    log.propagate = False
    return log
