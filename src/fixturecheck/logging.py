"""Structured logging helpers with run IDs.

Log lines go to stderr so stdout stays free for the report (``--json`` output
is parsed by CI). An interactive stderr gets structlog's console renderer;
anything else gets one JSON object per line.
"""

from __future__ import annotations

import logging
import sys
from typing import Any, TextIO, cast

import structlog
from structlog.contextvars import bind_contextvars, clear_contextvars


def select_renderer(stream: TextIO) -> Any:
    """Pick the final structlog processor for ``stream``."""
    isatty = getattr(stream, "isatty", None)
    if callable(isatty) and isatty():
        return structlog.dev.ConsoleRenderer(colors=False)
    return structlog.processors.JSONRenderer()


def configure_logging(level: str, stream: TextIO | None = None) -> None:
    """Route structlog events at ``level`` and above to ``stream`` (stderr)."""
    stream = stream or sys.stderr
    numeric_level = logging.getLevelNamesMapping().get(level.upper(), logging.WARNING)

    logging.basicConfig(format="%(message)s", level=numeric_level, stream=stream)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            select_renderer(stream),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def bind_run_id(run_id: str) -> None:
    bind_contextvars(run_id=run_id)


def clear_logging_context() -> None:
    clear_contextvars()


def get_logger(name: str | None = None) -> structlog.BoundLogger:
    return cast(structlog.BoundLogger, structlog.get_logger(name))
