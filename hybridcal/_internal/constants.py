"""Internal constants for HybridCal.

Calendar rule tables and the Gregorian reform boundary. All tables are
1-indexed by month with a placeholder at index 0. This module is not
part of the public API.
"""

from __future__ import annotations

# First year of the Gregorian calendar; earlier years are proleptic Julian
GREGORIAN_REFORM_YEAR: int = 1582
GREGORIAN_REFORM_MONTH: int = 10

# October 5-14, 1582 never happened
FIRST_DROPPED_DAY: int = 5
LAST_DROPPED_DAY: int = 14
DROPPED_DAYS: int = LAST_DROPPED_DAY - FIRST_DROPPED_DAY + 1

REFORM_YEAR_DAYS: int = 365 - DROPPED_DAYS  # 355

# Days in each month (non-leap year)
DAYS_IN_MONTH: tuple[int, ...] = (
    0,   # Placeholder for 1-indexed access
    31,  # January
    28,  # February (non-leap)
    31,  # March
    30,  # April
    31,  # May
    30,  # June
    31,  # July
    31,  # August
    30,  # September
    31,  # October
    30,  # November
    31,  # December
)

# Days before the first of each month, for non-leap years
DAYS_BEFORE_MONTH: tuple[int, ...] = (
    0, 0, 31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334
)

MONTH_NAMES: tuple[str, ...] = (
    "",
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)


__all__ = [
    "GREGORIAN_REFORM_YEAR",
    "GREGORIAN_REFORM_MONTH",
    "FIRST_DROPPED_DAY",
    "LAST_DROPPED_DAY",
    "DROPPED_DAYS",
    "REFORM_YEAR_DAYS",
    "DAYS_IN_MONTH",
    "DAYS_BEFORE_MONTH",
    "MONTH_NAMES",
]
