"""Assertion harness handed to each check.

A check declares how many assertions it will make, makes them, then signals
completion. The harness records the first failing assertion and turns an
assertion-count mismatch into a failure at ``done()``.
"""

from __future__ import annotations

import difflib

from fixturecheck.errors import HarnessError


def unified_diff(actual: str, expected: str, *, actual_label: str, expected_label: str) -> str:
    """Return a unified diff from ``expected`` to ``actual``."""
    lines = difflib.unified_diff(
        expected.splitlines(keepends=True),
        actual.splitlines(keepends=True),
        fromfile=expected_label,
        tofile=actual_label,
    )
    return "".join(line if line.endswith("\n") else line + "\n" for line in lines)


class CheckContext:
    """Per-check assertion recorder."""

    def __init__(self, suite: str, name: str) -> None:
        self.suite = suite
        self.name = name
        self.expected_assertions: int | None = None
        self.assertions = 0
        self.passed = True
        self.message = ""
        self.actual: str | None = None
        self.expected: str | None = None
        self.diff: str | None = None
        self.error: str | None = None
        self.completed = False

    def expect(self, count: int) -> None:
        if count < 0:
            raise HarnessError("expect() count must be non-negative")
        self.expected_assertions = count

    def equal(
        self,
        actual: str,
        expected: str,
        message: str,
        *,
        actual_label: str = "actual",
        expected_label: str = "expected",
    ) -> bool:
        """Assert exact string equality; return the outcome."""
        if self.completed:
            raise HarnessError(f"{self.suite}.{self.name}: assertion after done()")
        self.assertions += 1
        if actual == expected:
            if self.passed:
                self.message = message
            return True
        if self.passed:
            self.passed = False
            self.message = message
            self.actual = actual
            self.expected = expected
            self.diff = unified_diff(
                actual,
                expected,
                actual_label=actual_label,
                expected_label=expected_label,
            )
        return False

    def fail(self, error: str) -> None:
        """Record an error raised while the check was running."""
        self.passed = False
        self.error = error

    def done(self) -> None:
        if self.completed:
            raise HarnessError(f"{self.suite}.{self.name}: done() called twice")
        self.completed = True
        if self.expected_assertions is not None and self.expected_assertions != self.assertions:
            self.passed = False
            self.error = (
                f"Expected {self.expected_assertions} assertions, {self.assertions} ran"
            )
