"""ISO 8601 style date formatting and parsing.

Supported forms:
    - YYYY-MM-DD (extended format, four or more year digits)
    - -YYYY-MM-DD (negative years for BC)
    - +YYYY-MM-DD

Years are signed hybrid-calendar years, so ``-0044-03-15`` is March 15,
44 BC. Year ``0000`` parses but does not validate.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from hybridcal.errors import ParseError

if TYPE_CHECKING:
    from hybridcal.core.date import Date

_DATE_PATTERN = re.compile(r"^([+-]?\d{4,})-(\d{2})-(\d{2})$")


def parse_ymd(s: str) -> tuple[int, int, int]:
    """Split a ``YYYY-MM-DD`` string into integer components.

    Raises:
        ParseError: If the string is not in the expected format.
    """
    match = _DATE_PATTERN.match(s.strip())
    if not match:
        raise ParseError(
            f"Invalid ISO 8601 date format: {s!r}. "
            "Expected YYYY-MM-DD or -YYYY-MM-DD"
        )
    return int(match.group(1)), int(match.group(2)), int(match.group(3))


def format_ymd_iso(year: int, month: int, day: int) -> str:
    """Return year, month, day as ``YYYY-MM-DD``.

    Examples:
        >>> format_ymd_iso(2024, 1, 15)
        '2024-01-15'
        >>> format_ymd_iso(-44, 3, 15)
        '-0044-03-15'
    """
    if year >= 0:
        return f"{year:04d}-{month:02d}-{day:02d}"
    # Negative year with leading minus
    return f"{year:05d}-{month:02d}-{day:02d}"


def parse_date(s: str) -> Date:
    """Parse a ``YYYY-MM-DD`` string into a Date.

    The result is not validated; call Date.validate() or pass it to
    days_between() to check it against the calendar.

    Raises:
        ParseError: If the string is not in the expected format.

    Examples:
        >>> parse_date("1582-10-15")
        Date(1582, 10, 15)
        >>> parse_date("-0001-12-31")
        Date(-1, 12, 31)
    """
    # Import here to avoid circular imports
    from hybridcal.core.date import Date

    return Date(*parse_ymd(s))


__all__ = [
    "parse_ymd",
    "format_ymd_iso",
    "parse_date",
]
