"""Tests for sawmill.event.levels."""

import pytest

from sawmill.event.levels import Level

ORDERED = [
    Level.DEBUG,
    Level.INFO,
    Level.NOTICE,
    Level.WARNING,
    Level.ERROR,
    Level.CRITICAL,
    Level.ALERT,
    Level.EMERGENCY,
]


class TestLevelNames:
    """str(level) comes from a fixed table of eight names."""

    @pytest.mark.parametrize("level,expected", [
        (Level.DEBUG, "Debug"),
        (Level.INFO, "Info"),
        (Level.NOTICE, "Notice"),
        (Level.WARNING, "Warning"),
        (Level.ERROR, "Error"),
        (Level.CRITICAL, "Critical"),
        (Level.ALERT, "Alert"),
        (Level.EMERGENCY, "Emergency"),
    ])
    def test_str(self, level: Level, expected: str) -> None:
        assert str(level) == expected

    def test_exactly_eight_levels(self) -> None:
        assert len(Level) == 8

    @pytest.mark.parametrize("alias,canonical", [
        (Level.DBG, Level.DEBUG),
        (Level.WARN, Level.WARNING),
        (Level.ERR, Level.ERROR),
        (Level.CRIT, Level.CRITICAL),
        (Level.ALRT, Level.ALERT),
        (Level.EMERG, Level.EMERGENCY),
    ])
    def test_aliases_are_same_member(self, alias: Level, canonical: Level) -> None:
        assert alias is canonical
        assert str(alias) == str(canonical)


class TestLevelOrdering:
    def test_severity_order(self) -> None:
        assert sorted(reversed(ORDERED)) == ORDERED
        for lower, higher in zip(ORDERED, ORDERED[1:]):
            assert lower < higher

    def test_ordinals(self) -> None:
        assert [int(level) for level in ORDERED] == list(range(8))

    def test_out_of_range_is_an_error(self) -> None:
        with pytest.raises(ValueError):
            Level(8)


class TestLevelParse:
    @pytest.mark.parametrize("text,expected", [
        ("debug", Level.DEBUG),
        ("Info", Level.INFO),
        ("NOTICE", Level.NOTICE),
        ("warn", Level.WARNING),
        ("  Err ", Level.ERROR),
        ("crit", Level.CRITICAL),
        ("alrt", Level.ALERT),
        ("emerg", Level.EMERGENCY),
        ("3", Level.WARNING),
        (5, Level.CRITICAL),
    ])
    def test_known(self, text: str | int, expected: Level) -> None:
        assert Level.parse(text) is expected

    def test_unknown(self) -> None:
        with pytest.raises(ValueError, match="unknown level"):
            Level.parse("trace")
