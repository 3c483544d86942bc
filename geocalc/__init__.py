"""Lightweight geodesic calculations on a spherical Earth model.

geocalc answers the everyday proximity questions of location-aware
applications without a full GIS stack: how far apart two points are, which
way one lies from the other, where a given bearing and distance lead, and
which latitude/longitude box encloses a radius around a point.

Package Layout:
    Geographic Values (geocalc.geo):
        • Coordinate: latitude or longitude in decimal degrees, built from
          degrees, radians or an angle unit
        • Point: immutable latitude/longitude pair
        • BoundingArea: rectangle with antimeridian-aware containment

    Calculations (geocalc.earth_calc):
        • distance, bearing, point_radial_distance, bounding_area

    Units (geocalc.unit):
        • Radian, Degree and Meter quantities accepted wherever the
          calculator takes a bearing or a distance

    Constants (geocalc.config):
        • EARTH_DIAMETER, POLE_EPSILON

Accuracy:
    The Earth is modelled as a sphere of radius 6371.01 km. Results differ
    from ellipsoidal (WGS84) geodesics by up to about 0.5%, which is ample
    for proximity search and bounding-box prefiltering.

Inputs are not range checked. Out-of-range latitudes or longitudes, NaN and
infinities go through the formulas and come back in the results.

Usage:
    >>> from geocalc import Point, bearing, distance, point_radial_distance
    >>> kew = Point.from_degrees(51.4843774, -0.2912044)
    >>> richmond = Point.from_degrees(51.4613418, -0.3035466)
    >>> round(distance(kew, richmond), 3)
    2700.326
    >>> there = point_radial_distance(kew, bearing(kew, richmond), distance(kew, richmond))
    >>> round(there.latitude, 5), round(there.longitude, 5)
    (51.46134, -0.30355)
"""

from geocalc.config import EARTH_DIAMETER
from geocalc.earth_calc import bearing, bounding_area, distance, point_radial_distance
from geocalc.geo import BoundingArea, Coordinate, Point

__all__ = [
    "EARTH_DIAMETER",
    "BoundingArea",
    "Coordinate",
    "Point",
    "bearing",
    "bounding_area",
    "distance",
    "point_radial_distance",
]
