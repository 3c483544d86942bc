"""Distance unit used for radial distances and bounding-area radii.

Classes:
    Meter: Base distance unit in meters (SI unit).

Type Aliases:
    Length: Alias for the supported distance units.

Example:
    >>> radius = Meter(3000)
    >>> print(radius)
    3000.0 m
"""

from __future__ import annotations

from .unit_float import UnitFloat


class Meter(UnitFloat):
    """Distance unit: Meter (SI base unit for length).

    Attributes:
        IS_FAMILY_ROOT (bool): True, indicating this is the root distance unit.
        SCALE_TO_SI (float): 1.0, no conversion needed for SI base unit.
        SYMBOL (str): "m", the standard symbol for meters.
    """

    IS_FAMILY_ROOT = True
    SCALE_TO_SI = 1.0
    SYMBOL = "m"


Length = Meter  # Type alias for any length unit
