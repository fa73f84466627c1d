"""Tests for fixture file reading."""

from __future__ import annotations

from pathlib import Path

import pytest

from fixturecheck.errors import FixtureReadError
from fixturecheck.files import read_file


def test_read_file_returns_exact_text(tmp_path: Path) -> None:
    path = tmp_path / "a.css"
    path.write_bytes(b".a{color:red}\r\n.b{}\n")
    assert read_file(path) == ".a{color:red}\r\n.b{}\n"


def test_read_file_empty(tmp_path: Path) -> None:
    path = tmp_path / "empty.css"
    path.write_bytes(b"")
    assert read_file(path) == ""


def test_read_file_strips_bom_by_default(tmp_path: Path) -> None:
    path = tmp_path / "bom.css"
    path.write_bytes(b"\xef\xbb\xbf.a{}")
    assert read_file(path) == ".a{}"


def test_read_file_preserves_bom_when_asked(tmp_path: Path) -> None:
    path = tmp_path / "bom.css"
    path.write_bytes(b"\xef\xbb\xbf.a{}")
    assert read_file(path, preserve_bom=True) == "\ufeff.a{}"


def test_read_file_missing_raises(tmp_path: Path) -> None:
    missing = tmp_path / "nope.css"
    with pytest.raises(FixtureReadError) as excinfo:
        read_file(missing)
    assert excinfo.value.path == missing
    assert excinfo.value.reason == "file not found"
    assert "nope.css" in str(excinfo.value)


def test_read_file_directory_raises(tmp_path: Path) -> None:
    with pytest.raises(FixtureReadError, match="directory"):
        read_file(tmp_path)


def test_read_file_undecodable_raises(tmp_path: Path) -> None:
    path = tmp_path / "bad.css"
    path.write_bytes(b"\xff\xfe\xfa")
    with pytest.raises(FixtureReadError, match="utf-8"):
        read_file(path)


def test_read_file_alternate_encoding(tmp_path: Path) -> None:
    path = tmp_path / "latin.css"
    path.write_bytes("/* caf\xe9 */".encode("latin-1"))
    assert read_file(path, encoding="latin-1") == "/* caf\xe9 */"
