"""Text file reading for fixture comparison."""

from __future__ import annotations

from pathlib import Path

from fixturecheck.errors import FixtureReadError

BOM = "\ufeff"


def read_file(path: Path, *, encoding: str = "utf-8", preserve_bom: bool = False) -> str:
    """Read ``path`` as text without newline translation.

    A leading byte-order mark is dropped unless ``preserve_bom`` is set, so a
    generator that emits a BOM still matches a fixture saved without one.
    """
    try:
        raw = path.read_bytes()
    except FileNotFoundError as exc:
        raise FixtureReadError(path, "file not found") from exc
    except IsADirectoryError as exc:
        raise FixtureReadError(path, "path is a directory") from exc
    except OSError as exc:
        raise FixtureReadError(path, exc.strerror or str(exc)) from exc

    try:
        text = raw.decode(encoding)
    except UnicodeDecodeError as exc:
        raise FixtureReadError(path, f"not valid {encoding} text ({exc.reason})") from exc

    if not preserve_bom and text.startswith(BOM):
        text = text[1:]
    return text
