"""Day-difference arithmetic across the Julian/Gregorian cutover.

This module holds the canonical implementation of date subtraction.
``Date.__sub__`` delegates to days_between().
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from hybridcal._internal.calendar import day_of_year, days_in_year

if TYPE_CHECKING:
    from hybridcal.core.date import Date

logger = logging.getLogger(__name__)


def days_in_years(start: int, stop: int) -> int:
    """Return the total length of the years in ``[start, stop)``.

    Year 0 contributes nothing, so spans crossing from BC to AD need no
    special handling.

    Examples:
        >>> days_in_years(1980, 1981)
        366
        >>> days_in_years(-1, 1)  # 1 BC only
        366
    """
    return sum(days_in_year(year) for year in range(start, stop))


def days_between(first: Date, last: Date) -> int:
    """Return the signed number of days from ``first`` to ``last``.

    The result is positive when ``last`` is the later date. Both dates
    are validated first, ``first`` before ``last``, and the first error
    found is raised without attempting any computation.

    Args:
        first: The start date.
        last: The end date.

    Returns:
        Days from first to last.

    Raises:
        ValidationError: If either date is not a valid calendar date.

    Examples:
        >>> from hybridcal.core.date import Date
        >>> days_between(Date(1980, 1, 1), Date(1981, 1, 1))
        366
        >>> days_between(Date(1981, 1, 1), Date(1980, 1, 1))
        -366
        >>> days_between(Date(1582, 10, 4), Date(1582, 10, 15))
        1
    """
    first.validate()
    last.validate()

    low, high = sorted((first.year, last.year))
    year_days = days_in_years(low, high)
    first_doy = day_of_year(first.year, first.month, first.day)
    last_doy = day_of_year(last.year, last.month, last.day)

    if first.year > last.year:
        result = -year_days - first_doy + last_doy
    else:
        result = year_days - first_doy + last_doy

    logger.debug(
        "days_between %r -> %r: years=%s doy=(%s, %s) result=%s",
        first, last, year_days, first_doy, last_doy, result,
    )
    return result


__all__ = [
    "days_in_years",
    "days_between",
]
