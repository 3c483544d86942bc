"""Float-based units with automatic SI conversion and type safety.

UnitFloat combines Python's float type with a unit family check: values are
stored in SI units (radians, meters) and can only be read back through a
unit of the same family.

Example:
    >>> class Meter(UnitFloat):
    ...     IS_FAMILY_ROOT = True
    ...     SCALE_TO_SI = 1.0
    ...     SYMBOL = "m"
    ...
    >>> print(Meter(250))
    250.0 m
"""
from __future__ import annotations

from typing import ClassVar

from geocalc.config import Number

from .unit_base import Unit


class UnitFloat(float, Unit):
    """Base class for quantities stored in SI units.

    Attributes:
        SCALE_TO_SI (ClassVar[float]): Conversion factor to SI units.
        IS_FAMILY_ROOT (ClassVar[bool]): Indicates if this class is a root unit.
    """

    SCALE_TO_SI: ClassVar[float] = 1.0
    IS_FAMILY_ROOT: ClassVar[bool] = True

    def __new__(cls, value: Number):
        """Create a new instance, converting value from the unit's scale to SI.

        Args:
            value: Numeric value in the unit's native scale.
        """
        return float.__new__(cls, float(value) * cls.SCALE_TO_SI)

    def to(self, unit_type: type[UnitFloat]) -> float:
        """Convert to another unit of the same family.

        Args:
            unit_type: Target unit type to convert to.

        Returns:
            float: Value in the target unit's scale.

        Raises:
            TypeError: If unit_type is from another family.
        """
        self._check_same_root(unit_type)
        return float(self) / unit_type.SCALE_TO_SI

    def __eq__(self, other: object) -> bool:
        """Equal when both are of the same family and hold the same SI value.

        Units of another family compare unequal rather than raising. Plain
        numbers fall back to float comparison against the SI value.
        """
        if not isinstance(other, Unit) or self.ROOT is not other.ROOT:
            return NotImplemented
        return float(self) == float(other)

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    __hash__ = float.__hash__

    def __str__(self) -> str:
        return f"{self.to(type(self))} {type(self).SYMBOL}".strip()

    def __repr__(self) -> str:
        return f"{self.to(type(self)):g} {type(self).SYMBOL} (= {float(self):g} SI)"
