"""File-equality checks."""

from __future__ import annotations

from collections.abc import Callable
from functools import partial
from pathlib import Path

from fixturecheck.files import read_file
from fixturecheck.harness import CheckContext
from fixturecheck.models import FixturePair

CheckFn = Callable[[CheckContext, Path], None]


def check_file_equality(
    ctx: CheckContext,
    root: Path,
    pair: FixturePair,
    *,
    encoding: str = "utf-8",
    preserve_bom: bool = False,
) -> None:
    """Compare one generated file against its fixture with a single assertion.

    Read errors propagate to the caller; they are not assertion failures.
    """
    ctx.expect(1)

    actual_path, expected_path = pair.resolve(root)
    actual = read_file(actual_path, encoding=encoding, preserve_bom=preserve_bom)
    expected = read_file(expected_path, encoding=encoding, preserve_bom=preserve_bom)

    ctx.equal(
        actual,
        expected,
        pair.message,
        actual_label=str(pair.actual),
        expected_label=str(pair.expected),
    )

    ctx.done()


def file_equality(
    pair: FixturePair,
    *,
    encoding: str = "utf-8",
    preserve_bom: bool = False,
) -> partial[None]:
    """Return a ``(ctx, root)`` check bound to ``pair``."""
    return partial(check_file_equality, pair=pair, encoding=encoding, preserve_bom=preserve_bom)
