"""Core calendar types.

This module provides:
    - Date: Calendar date in the hybrid Julian/Gregorian calendar
"""

from __future__ import annotations

from hybridcal.core.date import Date

__all__: list[str] = [
    "Date",
]
