"""Angular unit definitions for bearings and coordinates.

All angular measurements are stored in radians (the SI base unit) while
supporting input and display in both radians and degrees. The calculator
accepts these wherever it takes a bearing, and Coordinate.from_angle()
turns them into latitude or longitude values.

Classes:
    Radian: Base angular unit in radians (SI unit).
    Degree: Angular unit in degrees with automatic radian conversion.

Type Aliases:
    Angle: Union type for all angular units (Radian | Degree).

Example:
    >>> heading = Degree(45)
    >>> print(heading)
    45.0 °
    >>> turn = Radian(3.141592653589793)
    >>> turn.to(Degree)
    180.0
"""

from __future__ import annotations

from math import pi

from .unit_float import UnitFloat


class Radian(UnitFloat):
    """Angular unit: Radian (SI base unit for angles).

    Attributes:
        IS_FAMILY_ROOT (bool): True, indicating this is the root angular unit.
        SCALE_TO_SI (float): 1.0, no conversion needed for SI base unit.
        SYMBOL (str): "rad", the standard symbol for radians.
    """

    IS_FAMILY_ROOT = True
    SCALE_TO_SI = 1.0
    SYMBOL = "rad"


class Degree(Radian):
    """Angular unit: Degree (1/360 of a full rotation).

    Values are converted to radians for internal storage; use
    ``.to(Degree)`` to read them back in degrees.

    Example:
        >>> bearing = Degree(90)
        >>> float(bearing)  # radians
        1.5707963267948966
        >>> bearing.to(Degree)
        90.0
    """

    SCALE_TO_SI = pi / 180
    SYMBOL = "°"


Angle = Radian | Degree  # Type alias for any angle unit (radians or degrees)
