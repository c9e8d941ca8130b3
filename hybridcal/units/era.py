"""Era enumeration for BC/AD designation.

This module provides the Era enum for distinguishing between
dates before Christ (BC) and Anno Domini (AD) dates.
"""

from __future__ import annotations

from enum import Enum


class Era(Enum):
    """Historical era designation.

    Negative years are BC and positive years are AD. There is no year 0,
    so every valid year belongs to exactly one era.

    Examples:
        >>> Era.from_year(-44)
        <Era.BC: 'BC'>
        >>> Era.from_year(1582).suffix
        ''
    """

    BC = "BC"  # Before Christ
    AD = "AD"  # Anno Domini

    @classmethod
    def from_year(cls, year: int) -> Era:
        """Return the era of a signed year."""
        return cls.BC if year < 0 else cls.AD

    @property
    def is_bc(self) -> bool:
        """Return True if this era is BC."""
        return self is Era.BC

    @property
    def suffix(self) -> str:
        """Return the text appended to a rendered year.

        Only BC years are marked; AD is implied.

        Returns:
            " BC" for Era.BC, "" for Era.AD.
        """
        return " BC" if self is Era.BC else ""


__all__ = ["Era"]
