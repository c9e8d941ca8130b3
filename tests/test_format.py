"""Tests for date formatting and parsing."""

from __future__ import annotations

import pytest

from hybridcal import Date, ParseError
from hybridcal.format import format_date, format_ymd, parse_date
from hybridcal.format.iso8601 import format_ymd_iso, parse_ymd


class TestFormatDate:
    """Tests for the long English form."""

    @pytest.mark.parametrize(
        ("date", "expected"),
        [
            (Date(2000, 2, 29), "February 29, 2000"),
            (Date(1582, 10, 15), "October 15, 1582"),
            (Date(1, 1, 1), "January 1, 1"),
            (Date(-1, 12, 31), "December 31, 1 BC"),
            (Date(-44, 3, 15), "March 15, 44 BC"),
        ],
    )
    def test_format_date(self, date: Date, expected: str) -> None:
        """Dates render as '<Month> <day>, <year>[ BC]'."""
        assert format_date(date) == expected

    def test_no_ad_suffix(self) -> None:
        """AD years carry no suffix."""
        assert not format_date(Date(2024, 7, 4)).endswith("AD")

    def test_format_ymd_does_not_validate(self) -> None:
        """Out-of-range days are printed as given."""
        assert format_ymd(1979, 2, 29) == "February 29, 1979"

    def test_unnamed_month(self) -> None:
        """A month outside 1-12 cannot be rendered."""
        with pytest.raises(ValueError, match="month must be 1-12"):
            format_date(Date(2000, 0, 1))


class TestIso8601:
    """Tests for the YYYY-MM-DD form."""

    def test_parse_ymd(self) -> None:
        """Components are split into integers."""
        assert parse_ymd("1582-10-15") == (1582, 10, 15)
        assert parse_ymd("+2024-01-15") == (2024, 1, 15)
        assert parse_ymd(" -0044-03-15 ") == (-44, 3, 15)
        assert parse_ymd("12345-01-01") == (12345, 1, 1)

    @pytest.mark.parametrize("text", ["", "2024/01/15", "24-01-15", "2024-1-15", "abc"])
    def test_parse_invalid(self, text: str) -> None:
        """Malformed strings raise ParseError."""
        with pytest.raises(ParseError):
            parse_ymd(text)

    def test_parse_date(self) -> None:
        """parse_date returns an unvalidated Date."""
        assert parse_date("-0001-12-31") == Date(-1, 12, 31)
        assert parse_date("1979-02-29").is_valid is False

    def test_format_ymd_iso(self) -> None:
        """Years are zero-padded, BC years keep a minus sign."""
        assert format_ymd_iso(2024, 1, 15) == "2024-01-15"
        assert format_ymd_iso(1, 1, 1) == "0001-01-01"
        assert format_ymd_iso(-44, 3, 15) == "-0044-03-15"
