"""
Unit Tests for Attribute Normalization
"""

import pytest

from examclass_toolkit.common.attributes import (
    POINTS_KEYS,
    SPACE_KEYS,
    normalize_points,
    normalize_space,
    normalize_title,
)


class TestNormalizeTitle:
    """Tests for normalize_title."""

    def test_title_when_padded_then_trimmed(self):
        assert normalize_title("  Warm-up  ") == "Warm-up"

    @pytest.mark.parametrize("raw", [None, "", "   ", "\t\n"])
    def test_title_when_blank_then_none(self, raw):
        assert normalize_title(raw) is None

    def test_title_when_applied_twice_then_unchanged(self):
        once = normalize_title("  Q1 ")
        assert normalize_title(once) == once


class TestNormalizePoints:
    """Tests for normalize_points."""

    @pytest.mark.parametrize("raw,expected", [
        ("3", "3"),
        ("2.5", "2.5"),
        (" 10 ", "10"),
        (4, "4"),
    ])
    def test_points_when_plain_number_then_kept(self, raw, expected):
        assert normalize_points(raw) == expected

    @pytest.mark.parametrize("raw", ["3in", "", "-1", "+2", "3.", ".5", "two", "1,5", None, "٣", "３", "2.٥"])
    def test_points_when_not_plain_number_then_none(self, raw):
        assert normalize_points(raw) is None

    def test_points_when_applied_twice_then_unchanged(self):
        once = normalize_points(" 2.5 ")
        assert normalize_points(once) == once


class TestNormalizeSpace:
    """Tests for normalize_space."""

    def test_space_when_length_then_trimmed_without_unit_check(self):
        assert normalize_space(" 2in ") == "2in"
        assert normalize_space("whatever") == "whatever"

    def test_space_when_blank_then_none(self):
        assert normalize_space("  ") is None


class TestAliasKeys:
    """Alias key tables are searched in order."""

    def test_points_keys_when_listed_then_points_first(self):
        assert POINTS_KEYS[0] == "points"
        assert set(POINTS_KEYS) == {"points", "point", "pts", "p"}

    def test_space_keys_when_listed_then_space_first(self):
        assert SPACE_KEYS == ("space", "data-space", "sp")
