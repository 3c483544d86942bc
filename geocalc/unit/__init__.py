"""Type-safe units for the quantities the geodesic calculator consumes.

The calculator's public functions take bearings and distances either as
plain numbers (degrees and meters) or as unit values from this package.
Unit values are stored in SI units and carry their family, so a Degree
can be converted to radians and back but never mistaken for a Meter.

Unit Families:
    - Angle Family: Radian (root), Degree
    - Distance Family: Meter (root)

Example:
    >>> from geocalc.unit import Degree, Meter, Radian
    >>> heading = Degree(45)
    >>> heading.to(Radian)
    0.7853981633974483
    >>> Meter(10) + Degree(1)
    Traceback (most recent call last):
        ...
    TypeError: incompatible units: expected Meter, got Degree
"""

from .unit_angle import Angle, Degree, Radian
from .unit_base import Unit
from .unit_distance import Length, Meter
from .unit_float import UnitFloat

__all__ = [
    # Base classes
    "Unit",
    "UnitFloat",
    # Angular units
    "Radian",
    "Degree",
    "Angle",
    # Distance units
    "Meter",
    "Length",
]
