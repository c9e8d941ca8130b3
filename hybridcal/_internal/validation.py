"""Validation utilities for HybridCal.

Each check raises ValidationError tagged with the ErrorKind of the rule
it enforces. validate_date() runs them in order of precedence: year,
month, reform gap, day.

This module is not part of the public API.
"""

from __future__ import annotations

from hybridcal._internal.calendar import days_in_month, is_dropped_day
from hybridcal.errors import ErrorKind, ValidationError
from hybridcal.format.text import format_ymd


def validate_year(year: int) -> None:
    """Validate that a year exists.

    Args:
        year: The year to validate.

    Raises:
        ValidationError: If year is 0.
    """
    if year == 0:
        raise ValidationError(ErrorKind.YEAR_ZERO, "Year 0 does not exist")


def validate_month(month: int) -> None:
    """Validate that a month is within 1-12.

    Raises:
        ValidationError: If month is outside 1-12.
    """
    if month < 1 or month > 12:
        raise ValidationError(ErrorKind.INVALID_MONTH, f"Invalid month: {month}")


def validate_reform_gap(year: int, month: int, day: int) -> None:
    """Reject the days dropped by the Gregorian reform (October 5-14, 1582).

    Raises:
        ValidationError: If the date falls in the gap.
    """
    if is_dropped_day(year, month, day):
        raise ValidationError(
            ErrorKind.NONEXISTENT_DATE,
            f"{format_ymd(year, month, day)} does not exist",
        )


def validate_day(year: int, month: int, day: int) -> None:
    """Validate that a day is valid for the given year and month.

    Args:
        year: The year.
        month: The month (1-12).
        day: The day to validate.

    Raises:
        ValidationError: If day is invalid for the month.
    """
    max_day = days_in_month(year, month)
    if day < 1 or day > max_day:
        raise ValidationError(
            ErrorKind.INVALID_DAY,
            f"{format_ymd(year, month, day)}: Invalid day",
        )


def validate_date(year: int, month: int, day: int) -> None:
    """Validate that year, month, day form a date of the hybrid calendar.

    Raises:
        ValidationError: For the first rule the date breaks.
    """
    validate_year(year)
    validate_month(month)
    validate_reform_gap(year, month, day)
    validate_day(year, month, day)


__all__ = [
    "validate_year",
    "validate_month",
    "validate_reform_gap",
    "validate_day",
    "validate_date",
]
