"""HybridCal: day counting across the Julian/Gregorian calendar reform.

Dates before October 15, 1582 use the proleptic Julian calendar and later
dates the Gregorian calendar. Years are signed (negative for BC) and there
is no year 0.

Core Types:
    Date: Calendar date (year, month, day)

Units:
    Era: BC/AD era designation

Functions:
    days_between: Signed number of days between two dates
    is_leap_year: Leap year test for a signed year
    days_in_year: Length of a year (355 for 1582)
    format_date: Render a date as "October 15, 1582"
    parse_date: Parse "YYYY-MM-DD" into a Date

Exceptions:
    HybridCalError: Base exception
    ValidationError: Date does not exist in the calendar
    ParseError: Failed to parse string

Example:
    >>> from hybridcal import Date, days_between
    >>> days_between(Date(1582, 10, 4), Date(1582, 10, 15))
    1
"""

from __future__ import annotations

__version__ = "0.1.0"

# Core types
from hybridcal.core.date import Date

# Units
from hybridcal.units.era import Era

# Calendar functions
from hybridcal._internal.calendar import days_in_year, is_leap_year
from hybridcal.arithmetic.ops import days_between

# Exceptions
from hybridcal.errors import (
    ErrorKind,
    HybridCalError,
    ParseError,
    ValidationError,
)

# Format functions
from hybridcal.format import format_date, parse_date

__all__: list[str] = [
    "__version__",
    # Core types
    "Date",
    # Units
    "Era",
    # Calendar functions
    "days_between",
    "days_in_year",
    "is_leap_year",
    # Exceptions
    "ErrorKind",
    "HybridCalError",
    "ValidationError",
    "ParseError",
    # Format functions
    "format_date",
    "parse_date",
]
