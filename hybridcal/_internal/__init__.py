"""Internal utilities for HybridCal.

This module contains private implementation details:
    - Calendar rule tables and the reform boundary
    - Leap year, month and year length, day-of-year helpers
    - Validation helpers

Note: This module is not part of the public API.
"""

from __future__ import annotations

from hybridcal._internal.validation import (
    validate_date,
    validate_day,
    validate_month,
    validate_reform_gap,
    validate_year,
)

__all__: list[str] = [
    "validate_date",
    "validate_day",
    "validate_month",
    "validate_reform_gap",
    "validate_year",
]
