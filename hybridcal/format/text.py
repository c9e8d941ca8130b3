"""Long English date rendering.

Dates render as ``"<Month name> <day>, <year>"`` with the absolute year
and a ``" BC"`` suffix for negative years, e.g. ``"March 15, 44 BC"``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from hybridcal._internal.constants import MONTH_NAMES
from hybridcal.units.era import Era

if TYPE_CHECKING:
    from hybridcal.core.date import Date


def format_ymd(year: int, month: int, day: int) -> str:
    """Render year, month, day in long English form.

    The month must be in 1-12; the day and year are printed as given.

    Examples:
        >>> format_ymd(1582, 10, 15)
        'October 15, 1582'
        >>> format_ymd(-44, 3, 15)
        'March 15, 44 BC'
    """
    return f"{MONTH_NAMES[month]} {day}, {abs(year)}{Era.from_year(year).suffix}"


def format_date(date: Date) -> str:
    """Render a Date in long English form.

    Args:
        date: The date to render. Its month must be in 1-12.

    Returns:
        A string like ``"February 29, 2000"``.

    Raises:
        ValueError: If the month cannot be named.
    """
    if not 1 <= date.month <= 12:
        raise ValueError(f"month must be 1-12, got {date.month}")
    return format_ymd(date.year, date.month, date.day)


__all__ = [
    "format_ymd",
    "format_date",
]
