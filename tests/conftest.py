"""pytest fixtures for fixturecheck."""

from __future__ import annotations

import sys
from collections.abc import Callable
from pathlib import Path

import pytest

ROOT_DIR = Path(__file__).resolve().parents[1]
SRC_DIR = ROOT_DIR / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from fixturecheck.models import FixturePair

WriteFiles = Callable[..., FixturePair]


@pytest.fixture()
def write_pair(tmp_path: Path) -> WriteFiles:
    """Write an actual/expected file pair under ``tmp_path`` and return it."""

    def _write(
        actual: str | bytes | None,
        expected: str | bytes | None,
        *,
        actual_name: str = "tmp/out.css",
        expected_name: str = "tests/expected/out.css",
        message: str = "out.css should be equal.",
    ) -> FixturePair:
        for name, content in ((actual_name, actual), (expected_name, expected)):
            if content is None:
                continue
            path = tmp_path / name
            path.parent.mkdir(parents=True, exist_ok=True)
            if isinstance(content, bytes):
                path.write_bytes(content)
            else:
                path.write_bytes(content.encode("utf-8"))
        return FixturePair(
            actual=Path(actual_name),
            expected=Path(expected_name),
            message=message,
        )

    return _write


@pytest.fixture()
def responsive_root(tmp_path: Path) -> Path:
    """A project root holding matching font and sprite outputs and fixtures."""
    files = {
        "tmp/responsive-font.css": ".a{color:red}",
        "tests/expected/responsive-font.css": ".a{color:red}",
        "tmp/responsive-sprite-compass.css": ".icon{background-position:0 0}\n",
        "tests/expected/responsive-sprite.css": ".icon{background-position:0 0}\n",
    }
    for name, content in files.items():
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(content.encode("utf-8"))
    return tmp_path
