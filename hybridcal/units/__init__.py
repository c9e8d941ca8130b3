"""Calendar units and enumerations.

This module provides:
    - Era: BC/AD era designation enum
"""

from __future__ import annotations

from hybridcal.units.era import Era

__all__: list[str] = [
    "Era",
]
