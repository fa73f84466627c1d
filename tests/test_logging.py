"""Tests for structured logging helpers."""

from __future__ import annotations

import structlog

from fixturecheck.logging import (
    bind_run_id,
    clear_logging_context,
    configure_logging,
    get_logger,
    select_renderer,
)


def test_run_id_binding_round_trip() -> None:
    configure_logging("warning")
    bind_run_id("run-123")
    assert structlog.contextvars.get_contextvars()["run_id"] == "run-123"
    clear_logging_context()
    assert "run_id" not in structlog.contextvars.get_contextvars()


def test_get_logger_supports_bind() -> None:
    configure_logging("debug")
    logger = get_logger("fixturecheck.test").bind(suite="s")
    logger.debug("event")


class _Stream:
    def __init__(self, tty: bool) -> None:
        self._tty = tty

    def isatty(self) -> bool:
        return self._tty

    def write(self, text: str) -> int:
        return len(text)

    def flush(self) -> None:
        return None


def test_interactive_stream_gets_console_renderer() -> None:
    renderer = select_renderer(_Stream(tty=True))
    assert isinstance(renderer, structlog.dev.ConsoleRenderer)


def test_redirected_stream_gets_json_renderer() -> None:
    renderer = select_renderer(_Stream(tty=False))
    assert isinstance(renderer, structlog.processors.JSONRenderer)


def test_configure_logging_uses_renderer_for_stream() -> None:
    configure_logging("info", stream=_Stream(tty=False))
    processors = structlog.get_config()["processors"]
    assert isinstance(processors[-1], structlog.processors.JSONRenderer)
