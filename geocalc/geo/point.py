"""Geographic point on the spherical Earth model."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from geocalc.config import Number
from geocalc.unit import Angle, Length

from .coordinate import Coordinate

if TYPE_CHECKING:
    from .bounding_area import BoundingArea


@dataclass(frozen=True)
class Point:
    """An immutable latitude/longitude pair.

    Latitude and longitude are Coordinate values, i.e. floats in decimal
    degrees. Plain numbers passed to the constructor are taken as degrees,
    angle units are converted to degrees.
    The two components are independent and never cross-validated.

    Attributes:
        latitude (Coordinate): North/South position in degrees.
        longitude (Coordinate): East/West position in degrees.

    Example:
        >>> kew = Point.from_degrees(51.4843774, -0.2912044)
        >>> richmond = Point.from_degrees(51.4613418, -0.3035466)
        >>> round(kew.distance_to(richmond), 3)
        2700.326
    """

    latitude: Coordinate
    longitude: Coordinate

    def __post_init__(self):
        if not isinstance(self.latitude, Coordinate):
            object.__setattr__(self, "latitude", Coordinate(self.latitude))
        if not isinstance(self.longitude, Coordinate):
            object.__setattr__(self, "longitude", Coordinate(self.longitude))

    @classmethod
    def from_degrees(cls, lat: Number, lon: Number) -> Point:
        """Create a Point from latitude and longitude in decimal degrees."""
        return cls(Coordinate.from_degrees(lat), Coordinate.from_degrees(lon))

    @classmethod
    def from_radians(cls, lat: Number, lon: Number) -> Point:
        """Create a Point from latitude and longitude in radians."""
        return cls(Coordinate.from_radians(lat), Coordinate.from_radians(lon))

    def distance_to(self, other: Point) -> float:
        """Great-circle distance to other, in meters."""
        from geocalc.earth_calc import distance

        return distance(self, other)

    def bearing_to(self, other: Point) -> float:
        """Bearing from this point to other, in degrees within [0, 360)."""
        from geocalc.earth_calc import bearing

        return bearing(self, other)

    def forward(self, bearing: Number | Angle, distance: Number | Length) -> Point:
        """Point reached by travelling distance along bearing from here.

        Args:
            bearing: Degrees as a plain number, or an angle unit.
            distance: Meters as a plain number, or a Meter value.
        """
        from geocalc.earth_calc import point_radial_distance

        return point_radial_distance(self, bearing, distance)

    def bounding_area(self, distance: Number | Length) -> BoundingArea:
        """Bounding area of the given radius centred on this point."""
        from geocalc.earth_calc import bounding_area

        return bounding_area(self, distance)
