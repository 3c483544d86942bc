"""Latitude/longitude rectangle with antimeridian-aware containment."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from .point import Point

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BoundingArea:
    """An area defined by its north-east and south-west corners.

    The other two corners are derived at construction and are not part of
    the area's identity: two areas are equal when their defining corners
    are equal.

    When the south-west longitude is greater than the north-east one, the
    area is taken to wrap across the ±180° meridian and its longitude span
    is split into two ranges joined at the seam.

    Attributes:
        north_east (Point): Defining corner, upper latitude bound.
        south_west (Point): Defining corner, lower latitude bound.
        south_east (Point): South-west latitude, north-east longitude.
        north_west (Point): North-east latitude, south-west longitude.
    """

    north_east: Point
    south_west: Point
    south_east: Point = field(init=False, compare=False, repr=False)
    north_west: Point = field(init=False, compare=False, repr=False)

    def __post_init__(self):
        object.__setattr__(
            self,
            "south_east",
            Point(self.south_west.latitude, self.north_east.longitude),
        )
        object.__setattr__(
            self,
            "north_west",
            Point(self.north_east.latitude, self.south_west.longitude),
        )

    @property
    def crosses_antimeridian(self) -> bool:
        return self.south_west.longitude > self.north_east.longitude

    @property
    def corners(self) -> tuple[Point, Point, Point, Point]:
        """The four corners, clockwise from north-east."""
        return self.north_east, self.south_east, self.south_west, self.north_west

    def is_contained_within(self, point: Point) -> bool:
        """Check whether point lies inside this area, bounds included."""
        in_latitude = (
            self.south_west.latitude <= point.latitude <= self.north_east.latitude
        )
        if not in_latitude:
            return False

        if self.crosses_antimeridian:
            # point only needs to be in one of the two halves either side of the seam
            logger.debug("Area %s spans the antimeridian, splitting longitude range", self)
            west_of_seam = -180 <= point.longitude <= self.north_east.longitude
            east_of_seam = self.south_west.longitude <= point.longitude <= 180
            return west_of_seam or east_of_seam

        return self.south_west.longitude <= point.longitude <= self.north_east.longitude

    def __contains__(self, point: Point) -> bool:
        return self.is_contained_within(point)
