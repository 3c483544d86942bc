"""Global constants and type definitions for the geodesic calculator.

This module centralizes the numeric constants of the spherical Earth model
and the type aliases shared by the unit system and the calculator functions.

Constants:
    EARTH_DIAMETER: Scale factor, in meters, turning a central angle into a
                    surface distance. The value is the mean Earth radius
                    (6371.01 km); the name is kept from the published API.
    POLE_EPSILON: Threshold on |cos(latitude)| under which a destination is
                  treated as lying on a pole, where longitude is undefined.

Type Definitions:
    Number: Union type for plain numeric inputs accepted by the API.

Example:
    >>> from geocalc.config import EARTH_DIAMETER
    >>> EARTH_DIAMETER
    6371010.0
"""

EARTH_DIAMETER = 6371.01 * 1000  # meters

POLE_EPSILON = 0.000001

Number = int | float
