"""Centralized structlog configuration helpers."""

from __future__ import annotations

import logging
import os
import sys

import structlog
from structlog.types import Processor

LOG_LEVELS: dict[str, int] = {
    "critical": logging.CRITICAL,
    "error": logging.ERROR,
    "warning": logging.WARNING,
    "info": logging.INFO,
    "debug": logging.DEBUG,
}
LOG_FORMATS = ("console", "json")

LOG_LEVEL_ENV = "SAMPLE_STATS_LOG_LEVEL"
LOG_FORMAT_ENV = "SAMPLE_STATS_LOG_FORMAT"


def _resolve_level(level: str | None) -> int:
    """Map a level name (or the environment default) onto a logging constant."""
    name = level if level is not None else os.environ.get(LOG_LEVEL_ENV, "info")
    normalized = name.lower()
    if normalized not in LOG_LEVELS:
        valid = ", ".join(sorted(LOG_LEVELS))
        raise ValueError(f"Unsupported log level {name!r}. Choose one of: {valid}.")
    return LOG_LEVELS[normalized]


def _resolve_json_output(json_output: bool | None) -> bool:
    """Decide between JSON and console rendering."""
    if json_output is not None:
        return json_output
    fmt = os.environ.get(LOG_FORMAT_ENV, "console").lower()
    if fmt not in LOG_FORMATS:
        valid = ", ".join(LOG_FORMATS)
        raise ValueError(f"Unsupported log format {fmt!r}. Choose one of: {valid}.")
    return fmt == "json"


def configure_logging(
    level: str | None = None,
    *,
    json_output: bool | None = None,
) -> None:
    """Initialize structlog with a consistent processor chain.

    Arguments left as ``None`` fall back to ``SAMPLE_STATS_LOG_LEVEL`` and
    ``SAMPLE_STATS_LOG_FORMAT``.
    """

    level_value = _resolve_level(level)
    use_json = _resolve_json_output(json_output)

    logging.basicConfig(level=level_value, format="%(message)s", stream=sys.stderr)

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]
    renderer: Processor
    if use_json:
        renderer = structlog.processors.JSONRenderer(sort_keys=True)
    else:
        renderer = structlog.dev.ConsoleRenderer()

    structlog.configure(
        processors=shared_processors + [renderer],
        wrapper_class=structlog.make_filtering_bound_logger(level_value),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


__all__ = ["configure_logging", "LOG_FORMATS", "LOG_LEVELS"]
