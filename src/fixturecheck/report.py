"""Terminal and JSON rendering of run reports."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from fixturecheck.models import CheckResult, RunReport


def report_payload(report: RunReport) -> dict[str, Any]:
    """Return a JSON-ready representation of ``report``."""
    return report.model_dump(mode="json")


def write_report(report: RunReport, path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(
        json.dumps(report_payload(report), indent=2, sort_keys=True),
        encoding="utf-8",
    )


def _status_text(passed: bool) -> Text:
    return Text("PASS", style="bold green") if passed else Text("FAIL", style="bold red")


def _render_failure(console: Console, check: CheckResult) -> None:
    title = f"{check.suite}.{check.name}"
    lines: list[str] = []
    if check.message:
        lines.append(check.message)
    if check.error:
        lines.append(f"error: {check.error}")
    if check.actual is not None and check.expected is not None:
        lines.append(f"actual:   {check.actual!r}")
        lines.append(f"expected: {check.expected!r}")
    if check.diff:
        lines.append(check.diff.rstrip("\n"))
    console.print(Panel(Text("\n".join(lines)), title=title, box=box.ASCII, expand=False))


def render_report(report: RunReport, console: Console | None = None) -> None:
    """Print a summary table, failure details and overall counts."""
    console = console or Console()

    table = Table(box=box.ASCII, show_header=True, header_style="bold")
    table.add_column("Suite")
    table.add_column("Check")
    table.add_column("Assertions", justify="right")
    table.add_column("Status")
    for suite in report.suites:
        for check in suite.checks:
            table.add_row(suite.name, check.name, str(check.assertions), _status_text(check.passed))
    console.print(table)

    for check in report.failures():
        _render_failure(console, check)

    console.print(
        f"overall: {report.status} "
        f"({report.total - report.failed}/{report.total} checks, "
        f"{report.assertions} assertions)"
    )
