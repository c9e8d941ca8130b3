"""Calendar utilities for HybridCal.

This module provides internal functions for calendar calculations in the
hybrid Julian/Gregorian calendar:

- Dates before October 15, 1582 follow the proleptic Julian calendar.
- Dates from October 15, 1582 onward follow the Gregorian calendar.
- There is no year 0: year -1 (1 BC) is followed by year 1 (AD 1).

The functions operate on plain integers and assume validated input
unless stated otherwise. This module is not part of the public API.
"""

from __future__ import annotations

from hybridcal._internal.constants import (
    DAYS_BEFORE_MONTH,
    DAYS_IN_MONTH,
    DROPPED_DAYS,
    FIRST_DROPPED_DAY,
    GREGORIAN_REFORM_MONTH,
    GREGORIAN_REFORM_YEAR,
    LAST_DROPPED_DAY,
    REFORM_YEAR_DAYS,
)


def is_leap_year(year: int) -> bool:
    """Check if a year is a leap year in the hybrid calendar.

    BC years are shifted by one onto the astronomical year line first,
    so 1 BC (year -1) is tested as year 0. Before 1582 the Julian rule
    applies (divisible by 4, no century exception); from 1582 on the
    Gregorian rule applies.

    Args:
        year: The year to check (negative for BC, never 0).

    Returns:
        True if the year is a leap year.

    Examples:
        >>> is_leap_year(2000)  # Divisible by 400
        True
        >>> is_leap_year(2100)  # Divisible by 100 but not 400
        False
        >>> is_leap_year(100)  # Julian, no century exception
        True
        >>> is_leap_year(-1)  # 1 BC
        True
    """
    y = year + 1 if year < 0 else year
    if y < GREGORIAN_REFORM_YEAR:
        return y % 4 == 0
    return y % 400 == 0 or (y % 4 == 0 and y % 100 != 0)


def days_in_month(year: int, month: int) -> int:
    """Return the highest valid day number of a given month.

    October 1582 still runs to the 31st; the dropped days are a hole
    in the middle of the month, checked by is_dropped_day().

    Args:
        year: The year (needed for February in leap years).
        month: The month (1-12).

    Returns:
        Number of days in the month.

    Raises:
        ValueError: If month is not in 1-12.
    """
    if month < 1 or month > 12:
        raise ValueError(f"month must be 1-12, got {month}")

    if month == 2 and is_leap_year(year):
        return 29
    return DAYS_IN_MONTH[month]


def days_in_year(year: int) -> int:
    """Return the number of days in a year.

    Year 0 does not exist and counts as 0 days, which lets a span
    crossing from BC to AD sum year lengths without special-casing.

    Args:
        year: The year to check.

    Returns:
        0 for year 0, 355 for 1582, 366 for leap years, 365 otherwise.
    """
    if year == 0:
        return 0
    if year == GREGORIAN_REFORM_YEAR:
        return REFORM_YEAR_DAYS
    return 366 if is_leap_year(year) else 365


def is_dropped_day(year: int, month: int, day: int) -> bool:
    """Return True for the days skipped by the Gregorian reform."""
    return (
        year == GREGORIAN_REFORM_YEAR
        and month == GREGORIAN_REFORM_MONTH
        and FIRST_DROPPED_DAY <= day <= LAST_DROPPED_DAY
    )


def _after_reform_gap(year: int, month: int, day: int) -> bool:
    if year != GREGORIAN_REFORM_YEAR:
        return False
    if month != GREGORIAN_REFORM_MONTH:
        return month > GREGORIAN_REFORM_MONTH
    return day > LAST_DROPPED_DAY


def _days_before_month(year: int, month: int) -> int:
    """Return the number of days in the year before the first of the month.

    Ignores the reform gap; day_of_year() accounts for it.
    """
    result = DAYS_BEFORE_MONTH[month]
    if month > 2 and is_leap_year(year):
        result += 1
    return result


def day_of_year(year: int, month: int, day: int) -> int:
    """Return the 1-based position of a date within its year.

    Dates after the reform gap in 1582 are shifted back by the ten
    dropped days, so October 15, 1582 is day 278.

    Args:
        year: The year (validated, non-zero).
        month: The month (1-12).
        day: The day of the month.

    Returns:
        Day of year (1-366).

    Examples:
        >>> day_of_year(2024, 12, 31)
        366
        >>> day_of_year(1582, 10, 4)
        277
        >>> day_of_year(1582, 10, 15)
        278
    """
    result = _days_before_month(year, month) + day
    if _after_reform_gap(year, month, day):
        result -= DROPPED_DAYS
    return result


__all__ = [
    "is_leap_year",
    "days_in_month",
    "days_in_year",
    "is_dropped_day",
    "day_of_year",
]
