"""Single angular coordinate (latitude or longitude) stored in degrees."""

from __future__ import annotations

import math

from geocalc.config import Number
from geocalc.unit import Angle, Degree, Radian, Unit


class Coordinate(float):
    """A latitude or longitude value, held in decimal degrees.

    Coordinate is a float, so it can be used directly in arithmetic and
    comparisons, and equality and hashing are those of its degree value.
    No range check is made: latitudes outside [-90, 90] or longitudes
    outside [-180, 180] are kept as given and flow through the formulas.
    Angle units are read in degrees whatever unit they were given in;
    any other unit raises TypeError.

    Example:
        >>> Coordinate.from_degrees(51.4843774)
        Coordinate(51.4843774)
        >>> Coordinate.from_radians(math.pi / 2).degrees
        90.0
    """

    __slots__ = ()

    def __new__(cls, degrees: Number | Angle):
        if isinstance(degrees, Unit):
            Radian._check_same_root(type(degrees))
            degrees = degrees.to(Degree)
        return float.__new__(cls, degrees)

    @classmethod
    def from_degrees(cls, value: Number) -> Coordinate:
        """Create a coordinate from a value in decimal degrees."""
        return cls(value)

    @classmethod
    def from_radians(cls, value: Number) -> Coordinate:
        """Create a coordinate from a value in radians."""
        return cls(math.degrees(value))

    @classmethod
    def from_angle(cls, angle: Radian) -> Coordinate:
        """Create a coordinate from an angle unit (Radian or Degree).

        Raises:
            TypeError: If angle is not an angular unit.
        """
        Radian._check_same_root(type(angle))
        return cls(angle)

    @property
    def degrees(self) -> float:
        return float(self)

    @property
    def radians(self) -> float:
        return math.radians(self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({float(self)!r})"
