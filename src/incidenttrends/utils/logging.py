"""
Structured logging for the pipeline stages.

Events are key-value pairs (``log.info("Cleaned incidents", rows=...)``),
rendered for the terminal or as JSON lines.
"""

import logging
import sys
from typing import Any

import structlog

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _renderer(json_output: bool) -> list[structlog.types.Processor]:
    if json_output:
        return [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    return [structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty())]


def configure_logging(level: str = "INFO", json_output: bool = False) -> None:
    """
    Configure structlog and the standard library root logger.

    Args:
        level: One of LOG_LEVELS, case-insensitive.
        json_output: Emit one JSON object per event instead of console lines.

    Raises:
        ValueError: If the level is unknown.
    """
    name = level.upper()
    if name not in LOG_LEVELS:
        msg = f"Unknown log level {level!r}, expected one of {', '.join(LOG_LEVELS)}"
        raise ValueError(msg)
    log_level = logging.getLevelName(name)

    # Library loggers (matplotlib, pandera) go through the root logger
    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=log_level)
    logging.getLogger().setLevel(log_level)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.UnicodeDecoder(),
            *_renderer(json_output),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        # Loggers resolve sys.stdout per call
        cache_logger_on_first_use=False,
    )


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Module logger, e.g. ``log = get_logger(__name__)``."""
    return structlog.get_logger(name)


def log_context(**kwargs: Any) -> structlog.contextvars.bound_contextvars:
    """
    Bind key-value pairs to every event logged inside the block.

    Example:
        with log_context(project="nypd-shootings"):
            log.info("Starting pipeline")  # carries project=...
    """
    return structlog.contextvars.bound_contextvars(**kwargs)
