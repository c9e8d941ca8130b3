"""Date formatting and parsing.

Functions:
    format_date: Render a Date in long English form.
    format_ymd: Render raw year, month, day in long English form.
    parse_date: Parse an ISO 8601 style ``YYYY-MM-DD`` string.
"""

from __future__ import annotations

from hybridcal.format.iso8601 import parse_date
from hybridcal.format.text import format_date, format_ymd

__all__: list[str] = [
    "format_date",
    "format_ymd",
    "parse_date",
]
