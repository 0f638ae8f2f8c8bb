"""
Loxodromic (rhumb) lines: paths of constant bearing, solved in closed form
from meridional parts and meridional distances.
"""

from __future__ import annotations

__all__ = ['loxodromic_course', 'solve_loxodromic']

import math
from typing import TYPE_CHECKING

from georeference._const import DOUBLE_EPSILON, NAUTICAL_MILE, PARALLEL_SAILING_THRESHOLD
from georeference.coordinates import LatLngCoordinate
from georeference.lines import GeodeticLine, LineResult
from georeference.meridional import meridional_distance, meridional_parts
from georeference.utils.functions import wrap_longitude_delta
from georeference.utils.logging import LOGGER

if TYPE_CHECKING:  # pragma: no cover
    from georeference.ellipsoid import Ellipsoid


def loxodromic_course(
    ellipsoid: Ellipsoid,
    lat1: float,
    lon1: float,
    lat2: float,
    lon2: float,
) -> float:
    """
    Calculate the constant course of the rhumb line from point 1 to point 2.

    Returns:
        (float) the course in degrees, in [0, 360)
    """
    mp1 = float(meridional_parts(ellipsoid, lat1))
    mp2 = float(meridional_parts(ellipsoid, lat2))
    # Both points on the south pole sit at the same infinite meridional parts
    mp_delta = 0.0 if mp1 == mp2 else mp2 - mp1
    lat_delta = lat2 - lat1
    lon_delta_rad = math.radians(wrap_longitude_delta(lon2 - lon1))

    # Longitude difference expressed in the nautical miles of meridional parts
    departure = ellipsoid.equatorial_axis * lon_delta_rad / NAUTICAL_MILE
    if mp_delta == 0:
        course = math.copysign(math.pi / 2, departure)
    else:
        course = math.atan(departure / mp_delta)

    course_deg = math.degrees(course)
    if lat_delta >= 0:
        course_deg += 360
    else:
        course_deg += 180

    if course_deg >= 360:
        course_deg -= 360
    return course_deg


def solve_loxodromic(
    ellipsoid: Ellipsoid,
    lat1: float,
    lon1: float,
    lat2: float,
    lon2: float,
) -> LineResult:
    """
    Calculate the rhumb line between two points.

    Args:
        ellipsoid:
            The reference ellipsoid

        lat1, lon1:
            The start point, in degrees

        lat2, lon2:
            The end point, in degrees

    Returns:
        LineResult; DEGENERATE when the points coincide, SOLVED otherwise
    """
    if abs(lat1 - lat2) < DOUBLE_EPSILON and abs(lon1 - lon2) < DOUBLE_EPSILON:
        return LineResult.degenerate()

    lat_delta_rad = math.radians(lat2 - lat1)
    md_delta = float(
        meridional_distance(ellipsoid, lat2) - meridional_distance(ellipsoid, lat1)
    )
    course = loxodromic_course(ellipsoid, lat1, lon1, lat2, lon2)

    if abs(lat_delta_rad) < PARALLEL_SAILING_THRESHOLD:
        # Near parallel sailing; 1 / cos(course) blows up
        LOGGER.debug('Rhumb line treated as near-parallel sailing.')
        lon_delta_rad = math.radians(wrap_longitude_delta(lon2 - lon1))
        mid_lat_rad = math.radians(0.5 * (lat1 + lat2))

        # Expand md_delta / mp_delta about the mid latitude to order e2 * dlat^2
        e2 = ellipsoid.eccentricity ** 2
        ratio = (
            math.cos(mid_lat_rad) / math.sqrt(1 - e2 * math.sin(mid_lat_rad) ** 2) * (
                1.0 + (
                    e2 * math.cos(2 * mid_lat_rad) / 8 -
                    (1 + 2 * math.tan(mid_lat_rad) ** 2) / 24 -
                    e2 / 12
                ) * lat_delta_rad * lat_delta_rad
            )
        )
        distance = math.sqrt(
            md_delta ** 2 + (ellipsoid.equatorial_axis * ratio * lon_delta_rad) ** 2
        )
    else:
        distance = abs(md_delta / math.cos(math.radians(course)))

    return LineResult.solved(
        GeodeticLine(
            LatLngCoordinate(lat1, lon1),
            LatLngCoordinate(lat2, lon2),
            distance,
            course,
            course - 180 if course >= 180 else course + 180,
        )
    )
