"""Geographic value types for the spherical Earth model.

Components:
    Coordinate: Latitude or longitude value in decimal degrees
    Point: Immutable latitude/longitude pair
    BoundingArea: Latitude/longitude rectangle with containment test

Typical Usage:
    >>> from geocalc.geo import BoundingArea, Point
    >>> area = BoundingArea(
    ...     north_east=Point.from_degrees(10, -170),
    ...     south_west=Point.from_degrees(-10, 170),
    ... )
    >>> Point.from_degrees(0, 175) in area
    True
    >>> Point.from_degrees(0, 0) in area
    False
"""

from .bounding_area import BoundingArea
from .coordinate import Coordinate
from .point import Point

__all__ = ["BoundingArea", "Coordinate", "Point"]
