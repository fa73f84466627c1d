"""Named suites of checks."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from pathlib import Path

from fixturecheck.checks import CheckFn, file_equality
from fixturecheck.errors import UnknownSuiteError
from fixturecheck.models import FixturePair

SetupFn = Callable[[], None]


def _noop_setup() -> None:
    return None


@dataclass
class Suite:
    """A setup hook plus an ordered mapping of check name to check function."""

    name: str
    checks: dict[str, CheckFn] = field(default_factory=dict)
    setup: SetupFn = _noop_setup

    def add(self, name: str, check: CheckFn) -> None:
        if name in self.checks:
            raise ValueError(f"{self.name}: duplicate check name {name!r}")
        self.checks[name] = check


class Registry:
    """Ordered collection of suites keyed by name."""

    def __init__(self, suites: Iterable[Suite] = ()) -> None:
        self._suites: dict[str, Suite] = {}
        for suite in suites:
            self.add(suite)

    def add(self, suite: Suite) -> None:
        if suite.name in self._suites:
            raise ValueError(f"duplicate suite name {suite.name!r}")
        self._suites[suite.name] = suite

    def get(self, name: str) -> Suite:
        try:
            return self._suites[name]
        except KeyError:
            raise UnknownSuiteError(name) from None

    def names(self) -> list[str]:
        return list(self._suites)

    def select(self, names: Iterable[str] | None = None) -> list[Suite]:
        """Return the requested suites in registry order, or all of them."""
        if names is None:
            return list(self._suites.values())
        wanted = list(dict.fromkeys(names))
        for name in wanted:
            self.get(name)
        return [suite for suite in self._suites.values() if suite.name in wanted]

    def __len__(self) -> int:
        return len(self._suites)


FONT_PAIR = FixturePair(
    actual=Path("tmp/responsive-font.css"),
    expected=Path("tests/expected/responsive-font.css"),
    message="responsive-font.css should be equal.",
)

SPRITE_PAIR = FixturePair(
    actual=Path("tmp/responsive-sprite-compass.css"),
    expected=Path("tests/expected/responsive-sprite.css"),
    message="responsive-sprite-compass.css should be equal to responsive-sprite.css.",
)


def default_registry(*, encoding: str = "utf-8", preserve_bom: bool = False) -> Registry:
    """Build the responsive font and sprite suites."""
    font = Suite(name="yy_font")
    font.add("responsive_font", file_equality(FONT_PAIR, encoding=encoding, preserve_bom=preserve_bom))

    sprite = Suite(name="yy_responsive_sprite")
    sprite.add(
        "responsive_sprite_compass",
        file_equality(SPRITE_PAIR, encoding=encoding, preserve_bom=preserve_bom),
    )
    return Registry([font, sprite])
