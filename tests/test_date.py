"""Tests for the Date class."""

from __future__ import annotations

import pytest

from hybridcal import Date, Era, ParseError, ValidationError


class TestDateConstruction:
    """Tests for Date construction."""

    def test_basic_construction(self) -> None:
        """Test basic date construction."""
        d = Date(1582, 10, 15)
        assert d.year == 1582
        assert d.month == 10
        assert d.day == 15

    def test_bc_construction(self) -> None:
        """Negative years are BC."""
        d = Date(-44, 3, 15)
        assert d.year == -44
        assert d.era is Era.BC

    def test_immutable(self) -> None:
        """Components cannot be reassigned."""
        d = Date(2000, 1, 1)
        with pytest.raises(AttributeError):
            d.year = 2001  # type: ignore[misc]
        with pytest.raises(AttributeError):
            d.extra = 1  # type: ignore[attr-defined]


class TestDateFromIsoFormat:
    """Tests for Date.from_iso_format()."""

    def test_parse_standard_date(self) -> None:
        """Test parsing a standard date."""
        assert Date.from_iso_format("2024-01-15") == Date(2024, 1, 15)

    def test_parse_negative_year(self) -> None:
        """Test parsing a BC date."""
        assert Date.from_iso_format("-0044-03-15") == Date(-44, 3, 15)

    def test_parse_year_zero_is_not_validated(self) -> None:
        """Year 0 parses but is not a valid date."""
        d = Date.from_iso_format("0000-06-15")
        assert d.year == 0
        assert d.is_valid is False

    def test_parse_invalid_format(self) -> None:
        """Test that invalid format raises ParseError."""
        with pytest.raises(ParseError, match="Invalid ISO 8601 date format"):
            Date.from_iso_format("2024/01/15")

    def test_iso_roundtrip(self) -> None:
        """to_iso_format and from_iso_format agree."""
        for d in (Date(2024, 1, 15), Date(-44, 3, 15), Date(1, 1, 1)):
            assert Date.from_iso_format(d.to_iso_format()) == d


class TestDateProperties:
    """Tests for Date calendar queries."""

    def test_is_leap_year(self) -> None:
        """Leap year follows the hybrid rule."""
        assert Date(1500, 1, 1).is_leap_year is True
        assert Date(1700, 1, 1).is_leap_year is False
        assert Date(-1, 1, 1).is_leap_year is True

    def test_day_of_year(self) -> None:
        """day_of_year accounts for the reform gap."""
        assert Date(1582, 10, 4).day_of_year == 277
        assert Date(1582, 10, 15).day_of_year == 278
        assert Date(2024, 12, 31).day_of_year == 366

    def test_day_of_year_validates(self) -> None:
        """day_of_year refuses invalid dates."""
        with pytest.raises(ValidationError, match="does not exist"):
            Date(1582, 10, 10).day_of_year

    def test_era(self) -> None:
        """era is BC for negative years, AD otherwise."""
        assert Date(-1, 12, 31).era is Era.BC
        assert Date(1, 1, 1).era is Era.AD

    def test_replace(self) -> None:
        """replace() returns a new Date."""
        d = Date(2024, 1, 15)
        assert d.replace(month=6) == Date(2024, 6, 15)
        assert d.replace(year=-1, day=1) == Date(-1, 1, 1)
        assert d == Date(2024, 1, 15)


class TestDateComparison:
    """Tests for Date equality, hashing and ordering."""

    def test_equality(self) -> None:
        """Dates with the same components are equal."""
        assert Date(2024, 1, 15) == Date(2024, 1, 15)
        assert Date(2024, 1, 15) != Date(2024, 1, 16)
        assert Date(2024, 1, 15) != "2024-01-15"

    def test_hash(self) -> None:
        """Equal dates hash equally."""
        assert len({Date(2024, 1, 15), Date(2024, 1, 15), Date(-1, 1, 1)}) == 2

    def test_ordering(self) -> None:
        """Dates order chronologically, BC before AD."""
        dates = [Date(2000, 1, 1), Date(-44, 3, 15), Date(1582, 10, 15), Date(-1, 12, 31)]
        assert sorted(dates) == [
            Date(-44, 3, 15),
            Date(-1, 12, 31),
            Date(1582, 10, 15),
            Date(2000, 1, 1),
        ]
        assert Date(1582, 10, 4) < Date(1582, 10, 15)
        assert Date(1582, 10, 15) >= Date(1582, 10, 15)
        assert Date(1582, 10, 15) > Date(1582, 10, 4)
        assert Date(1582, 10, 4) <= Date(1582, 10, 4)


class TestDateStringRepresentation:
    """Tests for repr() and str()."""

    def test_repr(self) -> None:
        """repr() shows the constructor call."""
        assert repr(Date(-44, 3, 15)) == "Date(-44, 3, 15)"

    def test_str(self) -> None:
        """str() is the long English form."""
        assert str(Date(2000, 2, 29)) == "February 29, 2000"
        assert str(Date(-44, 3, 15)) == "March 15, 44 BC"

    def test_str_bad_month_falls_back_to_repr(self) -> None:
        """A month that cannot be named renders as repr()."""
        assert str(Date(2000, 13, 1)) == "Date(2000, 13, 1)"
