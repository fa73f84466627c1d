"""Run registered suites and collect results."""

from __future__ import annotations

import time
import uuid
from collections.abc import Iterable
from pathlib import Path

from fixturecheck.checks import CheckFn
from fixturecheck.errors import FixtureReadError, HarnessError
from fixturecheck.harness import CheckContext
from fixturecheck.logging import bind_run_id, clear_logging_context, get_logger
from fixturecheck.models import CheckResult, RunReport, SuiteReport
from fixturecheck.registry import Registry, Suite

logger = get_logger(__name__)


def run_check(suite: Suite, name: str, check: CheckFn, root: Path) -> CheckResult:
    """Run setup and one check, converting raised errors into a failed result."""
    ctx = CheckContext(suite.name, name)
    log = logger.bind(suite=suite.name, check=name)
    log.debug("check_started")
    started = time.perf_counter()
    try:
        suite.setup()
        check(ctx, root)
    except (FixtureReadError, HarnessError) as exc:
        ctx.fail(str(exc))
    except Exception as exc:
        ctx.fail(f"{type(exc).__name__}: {exc}")
    else:
        if not ctx.completed:
            ctx.fail("check returned without calling done()")
    duration_ms = (time.perf_counter() - started) * 1000.0

    result = CheckResult(
        suite=suite.name,
        name=name,
        passed=ctx.passed,
        message=ctx.message,
        expected_assertions=ctx.expected_assertions,
        assertions=ctx.assertions,
        actual=ctx.actual,
        expected=ctx.expected,
        diff=ctx.diff,
        error=ctx.error,
        duration_ms=round(duration_ms, 3),
    )
    if result.passed:
        log.info("check_passed", assertions=result.assertions)
    else:
        log.warning("check_failed", message=result.message, error=result.error)
    return result


def run_suite(suite: Suite, root: Path) -> SuiteReport:
    return SuiteReport(
        name=suite.name,
        checks=[run_check(suite, name, check, root) for name, check in suite.checks.items()],
    )


def run_suites(
    registry: Registry,
    root: Path,
    selected: Iterable[str] | None = None,
) -> RunReport:
    """Run the selected suites (all by default) against ``root``."""
    suites = registry.select(selected)
    bind_run_id(uuid.uuid4().hex)
    try:
        report = RunReport(
            root=str(root),
            suites=[run_suite(suite, root) for suite in suites],
        )
        logger.info(
            "run_finished",
            status=report.status,
            total=report.total,
            failed=report.failed,
        )
    finally:
        clear_logging_context()
    return report
