"""Pydantic models for fixturecheck.

This module defines the data structures shared by the harness, runner and
report layers:
- Fixture pairs (actual output path + expected fixture path)
- Per-check results
- Suite and run reports

All models use Pydantic for validation and serialization.
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator


class FixturePair(BaseModel):
    """A generated artifact and the fixture it must match.

    Attributes:
        actual: Path of the file produced by the system under test.
        expected: Path of the stored expected fixture.
        message: Human-readable label reported with the assertion.

    Example:
        ```python
        pair = FixturePair(
            actual=Path("tmp/responsive-font.css"),
            expected=Path("tests/expected/responsive-font.css"),
            message="responsive-font.css should be equal.",
        )
        ```
    """

    model_config = ConfigDict(frozen=True)

    actual: Path = Field(..., description="Generated output path")
    expected: Path = Field(..., description="Expected fixture path")
    message: str = Field(..., description="Assertion label")

    @field_validator("message")
    @classmethod
    def validate_message(cls, value: str) -> str:
        """Ensure the assertion label is non-empty."""
        if not value or not value.strip():
            raise ValueError("message must be non-empty")
        return value

    def resolve(self, root: Path) -> tuple[Path, Path]:
        """Return (actual, expected) resolved against ``root``."""
        return root / self.actual, root / self.expected


class CheckResult(BaseModel):
    """Outcome of a single named check."""

    suite: str = Field(..., description="Owning suite name")
    name: str = Field(..., description="Check name within the suite")
    passed: bool = Field(..., description="True when every assertion held")
    message: str = Field(default="", description="Label of the failing or last assertion")
    expected_assertions: int | None = Field(
        default=None, description="Assertion count declared via expect()"
    )
    assertions: int = Field(default=0, description="Assertions actually evaluated")
    actual: str | None = Field(default=None, description="Actual value on mismatch")
    expected: str | None = Field(default=None, description="Expected value on mismatch")
    diff: str | None = Field(default=None, description="Unified diff on mismatch")
    error: str | None = Field(default=None, description="Error text when the check raised")
    duration_ms: float = Field(default=0.0, description="Wall time spent in the check")


class SuiteReport(BaseModel):
    """Results for every check in one suite, in registration order."""

    name: str
    checks: list[CheckResult] = Field(default_factory=list)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def passed(self) -> bool:
        return all(check.passed for check in self.checks)


class RunReport(BaseModel):
    """Aggregate outcome of a run across suites.

    Attributes:
        root: Directory the fixture paths were resolved against.
        suites: Per-suite results.
    """

    root: str
    suites: list[SuiteReport] = Field(default_factory=list)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def total(self) -> int:
        return sum(len(suite.checks) for suite in self.suites)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def failed(self) -> int:
        return sum(1 for suite in self.suites for check in suite.checks if not check.passed)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def assertions(self) -> int:
        return sum(check.assertions for suite in self.suites for check in suite.checks)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def status(self) -> Literal["pass", "fail"]:
        return "pass" if self.failed == 0 else "fail"

    @computed_field  # type: ignore[prop-decorator]
    @property
    def exit_code(self) -> int:
        return 0 if self.status == "pass" else 1

    def failures(self) -> list[CheckResult]:
        """Return failed checks across all suites."""
        return [check for suite in self.suites for check in suite.checks if not check.passed]
