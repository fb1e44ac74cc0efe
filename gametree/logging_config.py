"""Logging configuration for gametree command-line runs."""

from __future__ import annotations

import logging
import sys
from typing import IO, Optional, Union

_PLAIN_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
_JSON_FORMAT = '{"time":"%(asctime)s","level":"%(levelname)s","name":"%(name)s","message":"%(message)s"}'

# Handler installed by the last setup_logging call, replaced on the next one.
_installed: Optional[logging.Handler] = None


def setup_logging(
    level: Union[str, int] = "INFO",
    format_json: bool = False,
    stream: Optional[IO[str]] = None,
) -> logging.Handler:
    """
    Route gametree log records to ``stream`` (stderr by default).

    Stdout stays free for series summaries. Calling this again swaps the
    handler instead of adding a second one, so repeated ``main`` calls in one
    process do not duplicate output.

    Args:
        level: Level name (DEBUG, INFO, WARNING, ERROR, CRITICAL) or number
        format_json: Whether to emit one JSON object per record
        stream: Destination stream

    Returns:
        The installed handler
    """
    global _installed

    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)

    handler = logging.StreamHandler(stream or sys.stderr)
    if format_json:
        handler.setFormatter(logging.Formatter(_JSON_FORMAT))
    else:
        handler.setFormatter(logging.Formatter(_PLAIN_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))

    root = logging.getLogger("gametree")
    if _installed is not None:
        root.removeHandler(_installed)
    root.addHandler(handler)
    root.setLevel(level)
    _installed = handler
    return handler


def get_logger(name: str) -> logging.Logger:
    """Logger for a gametree module, usually called with ``__name__``."""
    return logging.getLogger(name)


__all__ = ["get_logger", "setup_logging"]
