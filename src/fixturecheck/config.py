"""Environment-backed settings for fixturecheck."""

from __future__ import annotations

import codecs
import logging
import os
from dataclasses import dataclass
from pathlib import Path

from fixturecheck.errors import ConfigError

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    """Resolved runtime settings."""

    root: Path
    log_level: str
    encoding: str
    preserve_bom: bool


def _get_root() -> Path:
    raw = os.getenv("FIXTURECHECK_ROOT", "").strip()
    return Path(raw) if raw else Path.cwd()


def _validate_log_level(value: str, source: str) -> str:
    level = value.strip().upper()
    if level not in logging.getLevelNamesMapping():
        raise ConfigError(f"{source} is not a known log level: {value}")
    return level


def _get_log_level() -> str:
    value = os.getenv("FIXTURECHECK_LOG_LEVEL", "").strip() or "WARNING"
    return _validate_log_level(value, "FIXTURECHECK_LOG_LEVEL")


def _get_encoding() -> str:
    value = os.getenv("FIXTURECHECK_ENCODING", "utf-8").strip() or "utf-8"
    try:
        codecs.lookup(value)
    except LookupError as exc:
        raise ConfigError(f"FIXTURECHECK_ENCODING is not a known codec: {value}") from exc
    return value


def _get_preserve_bom() -> bool:
    value = os.getenv("FIXTURECHECK_PRESERVE_BOM", "").strip().lower()
    return value in _TRUTHY


def load_settings(
    *,
    root: Path | None = None,
    log_level: str | None = None,
) -> Settings:
    """Build settings from the environment; explicit arguments win."""
    return Settings(
        root=root if root is not None else _get_root(),
        log_level=(
            _validate_log_level(log_level, "--log-level") if log_level else _get_log_level()
        ),
        encoding=_get_encoding(),
        preserve_bom=_get_preserve_bom(),
    )
