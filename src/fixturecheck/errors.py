"""Exception types raised by fixturecheck."""

from __future__ import annotations

from pathlib import Path


class FixtureCheckError(RuntimeError):
    """Base class for fixturecheck errors."""


class FixtureReadError(FixtureCheckError):
    """Raised when an actual or expected file cannot be read as text."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Unable to read file {path}: {reason}")


class HarnessError(FixtureCheckError):
    """Raised when a check misuses the assertion harness."""


class UnknownSuiteError(FixtureCheckError):
    """Raised when a requested suite is not registered."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Unknown suite: {name}")


class ConfigError(FixtureCheckError):
    """Raised for invalid environment configuration."""
