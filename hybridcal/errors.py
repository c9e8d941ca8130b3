"""HybridCal exception hierarchy.

All HybridCal-specific exceptions inherit from HybridCalError.
"""

from __future__ import annotations

from enum import Enum


class ErrorKind(Enum):
    """Reason a date failed calendar validation."""

    YEAR_ZERO = "year_zero"
    INVALID_MONTH = "invalid_month"
    NONEXISTENT_DATE = "nonexistent_date"
    INVALID_DAY = "invalid_day"


class HybridCalError(Exception):
    """Base exception for all HybridCal errors."""

    pass


class ValidationError(HybridCalError):
    """A date that does not exist in the hybrid calendar.

    The ``kind`` attribute tells which rule was broken; the message is
    the human-readable description.

    Examples:
        - Year 0
        - Month value outside 1-12
        - October 5-14, 1582 (dropped by the Gregorian reform)
        - Day value outside valid range for month
    """

    def __init__(self, kind: ErrorKind, message: str) -> None:
        super().__init__(message)
        self.kind = kind


class ParseError(HybridCalError):
    """Failed to parse string representation.

    Examples:
        - Malformed date string
        - Missing required components
    """

    pass


__all__ = [
    "ErrorKind",
    "HybridCalError",
    "ValidationError",
    "ParseError",
]
