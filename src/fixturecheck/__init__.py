"""fixturecheck: generated-artifact vs. fixture parity checks.

fixturecheck reads files produced by a build step and compares them, byte
for byte, against stored expected fixtures. Each comparison is one assertion;
the overall exit code reflects whether every check passed.

Key features:
    - Named suites of independent checks (font and sprite CSS out of the box)
    - A small assertion harness with declared assertion counts
    - Unified diffs for mismatches
    - Rich terminal report and JSON report export

Example:
    >>> from pathlib import Path
    >>> from fixturecheck.registry import default_registry
    >>> from fixturecheck.runner import run_suites
    >>> report = run_suites(default_registry(), root=Path("."))
    >>> exit_code = report.exit_code
"""

__all__ = ["__version__"]

__version__ = "0.1.0"
