"""Date arithmetic.

Arithmetic Operations (from hybridcal.arithmetic.ops):
    - days_between: Signed day count between two dates
    - days_in_years: Total length of a half-open range of years
"""

from __future__ import annotations

from hybridcal.arithmetic.ops import days_between, days_in_years

__all__ = [
    "days_between",
    "days_in_years",
]
