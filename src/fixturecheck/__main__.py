"""fixturecheck CLI entrypoint.

Usage:
    python -m fixturecheck                      # Run every suite
    python -m fixturecheck --suite yy_font      # Run one suite
    python -m fixturecheck --list               # List suites and checks
    python -m fixturecheck --json               # Print the report as JSON
    python -m fixturecheck --version            # Print version
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from rich.console import Console

from fixturecheck import __version__
from fixturecheck.config import load_settings
from fixturecheck.errors import ConfigError, UnknownSuiteError
from fixturecheck.logging import configure_logging
from fixturecheck.registry import Registry, default_registry
from fixturecheck.report import render_report, report_payload, write_report
from fixturecheck.runner import run_suites


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fixturecheck",
        description="Compare generated artifacts against expected fixtures.",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"fixturecheck {__version__}",
    )
    parser.add_argument(
        "--root",
        type=Path,
        default=None,
        help="Directory fixture paths are resolved against (default: $FIXTURECHECK_ROOT or cwd)",
    )
    parser.add_argument(
        "--suite",
        action="append",
        default=None,
        metavar="NAME",
        help="Run only this suite (repeatable)",
    )
    parser.add_argument("--list", action="store_true", help="List suites and checks, then exit")
    parser.add_argument("--json", action="store_true", help="Print the report as JSON")
    parser.add_argument("--output", type=Path, default=None, help="Optional JSON report path")
    parser.add_argument("--log-level", default=None, help="Log level (default: WARNING)")
    return parser


def _print_listing(registry: Registry) -> None:
    for name in registry.names():
        suite = registry.get(name)
        print(name)
        for check_name in suite.checks:
            print(f"  {check_name}")


def main(argv: list[str] | None = None, registry: Registry | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = load_settings(root=args.root, log_level=args.log_level)
    except ConfigError as exc:
        parser.error(str(exc))
    configure_logging(settings.log_level)

    if registry is None:
        registry = default_registry(
            encoding=settings.encoding,
            preserve_bom=settings.preserve_bom,
        )

    if args.list:
        _print_listing(registry)
        return 0

    try:
        report = run_suites(registry, settings.root, args.suite)
    except UnknownSuiteError as exc:
        parser.error(f"{exc} (known: {', '.join(registry.names())})")

    if args.output:
        write_report(report, args.output)

    if args.json:
        print(json.dumps(report_payload(report), indent=2, sort_keys=True))
    else:
        render_report(report, Console())

    return report.exit_code


if __name__ == "__main__":
    sys.exit(main())
