"""Date class representing a calendar date.

This module provides the Date class for representing calendar dates in
the hybrid calendar: proleptic Julian before October 15, 1582, Gregorian
from then on, with BC years as negative numbers and no year 0.
"""

from __future__ import annotations

from hybridcal._internal.calendar import day_of_year, is_leap_year
from hybridcal._internal.validation import validate_date
from hybridcal.arithmetic.ops import days_between
from hybridcal.errors import ValidationError
from hybridcal.format.iso8601 import format_ymd_iso, parse_ymd
from hybridcal.format.text import format_date
from hybridcal.units.era import Era


class Date:
    """A calendar date in the hybrid Julian/Gregorian calendar.

    Construction stores the components as given and does not check them:
    an unvalidated Date may hold any combination of integers. Call
    validate() (or pass the date to days_between()) before relying on
    calendar queries. Queries that need a real date, such as
    day_of_year, validate on their own.

    Attributes:
        year: The year (negative for BC, 0 never valid).
        month: The month (1-12).
        day: The day of the month (1-31).

    Examples:
        >>> d = Date(1582, 10, 15)
        >>> d.day_of_year
        278
        >>> str(d)
        'October 15, 1582'

        >>> str(Date(-44, 3, 15))  # Ides of March, 44 BC
        'March 15, 44 BC'

        >>> Date(2001, 2, 28) - Date(2000, 2, 29)
        365
    """

    __slots__ = ("_year", "_month", "_day")

    def __init__(self, year: int, month: int, day: int) -> None:
        """Create a Date from year, month, and day.

        Args:
            year: The year (negative for BC dates).
            month: The month (1-12).
            day: The day of the month.
        """
        self._year = year
        self._month = month
        self._day = day

    @classmethod
    def from_iso_format(cls, s: str) -> Date:
        """Parse a date from ISO 8601 format (YYYY-MM-DD).

        Supports negative years for BC dates. The result is not
        validated.

        Raises:
            ParseError: If the string is not valid ISO 8601 format.

        Examples:
            >>> Date.from_iso_format("1582-10-04")
            Date(1582, 10, 4)

            >>> Date.from_iso_format("-0044-03-15")  # 44 BC
            Date(-44, 3, 15)
        """
        return cls(*parse_ymd(s))

    @property
    def year(self) -> int:
        """Return the year component (negative for BC)."""
        return self._year

    @property
    def month(self) -> int:
        """Return the month component."""
        return self._month

    @property
    def day(self) -> int:
        """Return the day component."""
        return self._day

    def validate(self) -> None:
        """Check this date against the calendar rules.

        Rules are checked in order: year 0, month range, the October
        1582 reform gap, then the day range for the month.

        Raises:
            ValidationError: For the first rule the date breaks. Its
                ``kind`` attribute holds the ErrorKind.

        Examples:
            >>> Date(1979, 2, 29).validate()
            Traceback (most recent call last):
            ...
            hybridcal.errors.ValidationError: February 29, 1979: Invalid day
        """
        validate_date(self._year, self._month, self._day)

    @property
    def is_valid(self) -> bool:
        """Return True if this date exists in the hybrid calendar."""
        try:
            self.validate()
        except ValidationError:
            return False
        return True

    @property
    def is_leap_year(self) -> bool:
        """Return True if this date is in a leap year.

        Examples:
            >>> Date(1900, 1, 1).is_leap_year  # Gregorian
            False
            >>> Date(1500, 1, 1).is_leap_year  # Julian
            True
        """
        return is_leap_year(self._year)

    @property
    def day_of_year(self) -> int:
        """Return the day of the year.

        Raises:
            ValidationError: If the date is invalid.

        Examples:
            >>> Date(2024, 12, 31).day_of_year  # Leap year
            366
            >>> Date(1582, 12, 31).day_of_year  # Reform year
            355
        """
        self.validate()
        return day_of_year(self._year, self._month, self._day)

    @property
    def era(self) -> Era:
        """Return the era (BC or AD) for this date.

        Examples:
            >>> Date(2024, 1, 15).era
            <Era.AD: 'AD'>
            >>> Date(-44, 3, 15).era
            <Era.BC: 'BC'>
        """
        return Era.from_year(self._year)

    def replace(
        self,
        year: int | None = None,
        month: int | None = None,
        day: int | None = None,
    ) -> Date:
        """Return a new Date with specified components replaced.

        Examples:
            >>> Date(2024, 1, 15).replace(month=6)
            Date(2024, 6, 15)
        """
        return Date(
            year if year is not None else self._year,
            month if month is not None else self._month,
            day if day is not None else self._day,
        )

    def days_until(self, other: Date) -> int:
        """Return the signed number of days from this date to ``other``.

        Raises:
            ValidationError: If either date is invalid.
        """
        return days_between(self, other)

    def to_iso_format(self) -> str:
        """Return the date as an ISO 8601 string (YYYY-MM-DD).

        Examples:
            >>> Date(2024, 1, 15).to_iso_format()
            '2024-01-15'
            >>> Date(-44, 3, 15).to_iso_format()
            '-0044-03-15'
        """
        return format_ymd_iso(self._year, self._month, self._day)

    def _key(self) -> tuple[int, int, int]:
        return (self._year, self._month, self._day)

    def __sub__(self, other: object) -> int:
        """Return the signed number of days from ``other`` to this date.

        Examples:
            >>> Date(1981, 1, 1) - Date(1980, 1, 1)
            366
        """
        if not isinstance(other, Date):
            return NotImplemented  # type: ignore[return-value]
        return other.days_until(self)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self._key() == other._key()

    def __lt__(self, other: object) -> bool:
        """Check if this date is earlier than another.

        Examples:
            >>> Date(-1, 12, 31) < Date(1, 1, 1)
            True
        """
        if not isinstance(other, Date):
            return NotImplemented
        return self._key() < other._key()

    def __le__(self, other: object) -> bool:
        """Check if this date is earlier than or equal to another."""
        if not isinstance(other, Date):
            return NotImplemented
        return self._key() <= other._key()

    def __gt__(self, other: object) -> bool:
        """Check if this date is later than another."""
        if not isinstance(other, Date):
            return NotImplemented
        return self._key() > other._key()

    def __ge__(self, other: object) -> bool:
        """Check if this date is later than or equal to another."""
        if not isinstance(other, Date):
            return NotImplemented
        return self._key() >= other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __repr__(self) -> str:
        """Return a detailed string representation.

        Returns:
            String like 'Date(2024, 1, 15)'.
        """
        return f"Date({self._year}, {self._month}, {self._day})"

    def __str__(self) -> str:
        """Return the long English representation, e.g. 'March 15, 44 BC'.

        Dates whose month cannot be named fall back to repr().
        """
        if not 1 <= self._month <= 12:
            return repr(self)
        return format_date(self)


__all__ = ["Date"]
