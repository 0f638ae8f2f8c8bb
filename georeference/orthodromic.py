"""
Orthodromic (geodesic) lines via the Vincenty inverse solution.

Modified Rainsford's method with Helmert's elliptical terms, after subroutine
INVER1 of the NGS "inverse" program (L. Pfeifer, 1975; J. G. Gergen, 1975).
Effective in any azimuth and at any distance short of antipodal.
"""

from __future__ import annotations

__all__ = ['solve_orthodromic']

import math
from typing import TYPE_CHECKING

from georeference._const import (
    DOUBLE_EPSILON, VINCENTY_CONVERGENCE, VINCENTY_LIMIT_EPSILON, VINCENTY_MAX_ITERATIONS
)
from georeference.coordinates import LatLngCoordinate
from georeference.lines import GeodeticLine, LineResult
from georeference.utils.functions import normalize_bearing
from georeference.utils.logging import LOGGER, warn_once

if TYPE_CHECKING:  # pragma: no cover
    from georeference.ellipsoid import Ellipsoid


def _build_line(lat1, lon1, lat2, lon2, distance, faz, baz) -> GeodeticLine:
    """Packages radian azimuths into a line with [0, 360) degree bearings"""
    return GeodeticLine(
        LatLngCoordinate(lat1, lon1),
        LatLngCoordinate(lat2, lon2),
        distance,
        normalize_bearing(math.degrees(faz)),
        normalize_bearing(math.degrees(baz)),
    )


def solve_orthodromic(
    ellipsoid: Ellipsoid,
    lat1: float,
    lon1: float,
    lat2: float,
    lon2: float,
) -> LineResult:
    """
    Solve the geodetic inverse problem between two points.

    Args:
        ellipsoid:
            The reference ellipsoid

        lat1, lon1:
            The start point, in degrees

        lat2, lon2:
            The end point, in degrees

    Returns:
        LineResult; DEGENERATE when the points coincide, UNSOLVED when the
        iteration fails to converge for points that are neither coincident nor
        both on the equator.
    """
    if abs(lat1 - lat2) < DOUBLE_EPSILON and abs(lon1 - lon2) < DOUBLE_EPSILON:
        return LineResult.degenerate()

    flattening = ellipsoid.flattening
    r_lat1, r_lon1 = math.radians(lat1), math.radians(lon1)
    r_lat2, r_lon2 = math.radians(lat2), math.radians(lon2)

    R = 1 - flattening

    # Reduced latitudes
    tu1 = R * math.sin(r_lat1) / math.cos(r_lat1)
    tu2 = R * math.sin(r_lat2) / math.cos(r_lat2)
    cu1 = 1 / math.sqrt(tu1 * tu1 + 1)
    cu2 = 1 / math.sqrt(tu2 * tu2 + 1)
    su1 = cu1 * tu1
    s = cu1 * cu2
    baz = s * tu2
    faz = baz * tu1
    x = r_lon2 - r_lon1

    iterations = 0
    while iterations < VINCENTY_MAX_ITERATIONS:
        iterations += 1
        sx = math.sin(x)
        cx = math.cos(x)
        tu1 = cu2 * sx
        tu2 = baz - su1 * cu2 * cx
        sy = math.sqrt(tu1 ** 2 + tu2 ** 2)
        if sy == 0:
            # The points coincide on the auxiliary sphere; no further progress is possible
            break

        cy = s * cx + faz
        y = math.atan2(sy, cy)
        SA = s * sx / sy
        c2a = 1 - SA * SA
        cz = faz + faz
        if c2a > 0:
            cz = -cz / c2a + cy

        e = cz * cz * 2 - 1
        c = ((-3 * c2a + 4) * flattening + 4) * c2a * flattening / 16
        d = x
        x = ((e * cy * c + cz) * sy * c + y) * SA
        x = (1 - c) * x * flattening + r_lon2 - r_lon1

        if abs(d - x) <= VINCENTY_CONVERGENCE:
            x = math.sqrt((1 / (R * R) - 1) * c2a + 1) + 1
            x = (x - 2) / x
            c = 1 - x
            c = (x * x / 4 + 1) / c
            d = (0.375 * x * x - 1) * x
            x = e * cy
            s = 1 - 2 * e
            s = (
                (((sy * sy * 4 - 3) * s * cz * d / 6 - x) * d / 4 + cz) * sy * d + y
            ) * c * R * ellipsoid.equatorial_axis

            # Forward azimuth at point 1, reverse azimuth at point 2
            faz = math.atan2(tu1, tu2)
            baz = math.atan2(cu1 * sx, baz * cx - su1 * cu2) + math.pi
            return LineResult.solved(
                _build_line(lat1, lon1, lat2, lon2, s, faz, baz),
                iterations
            )

    # No convergence: the points are either equal or at antipodes
    if (
        abs(r_lon1 - r_lon2) <= VINCENTY_LIMIT_EPSILON and
        abs(r_lat1 - r_lat2) <= VINCENTY_LIMIT_EPSILON
    ):
        LOGGER.debug('Vincenty inverse did not converge; points treated as coincident.')
        return LineResult.degenerate(iterations)

    if abs(r_lat1) <= VINCENTY_LIMIT_EPSILON and abs(r_lat2) <= VINCENTY_LIMIT_EPSILON:
        LOGGER.debug('Vincenty inverse did not converge; using equatorial arc length.')
        warn_once(
            'Equatorial fallback bearings are taken from the unconverged iteration state '
            'and may not be meaningful; this warning will not repeat.'
        )
        return LineResult.solved(
            _build_line(
                lat1, lon1, lat2, lon2,
                abs(r_lon1 - r_lon2) * ellipsoid.equatorial_axis,
                faz, baz
            ),
            iterations
        )

    LOGGER.debug(
        'Vincenty inverse failed after %s iterations for (%s, %s) -> (%s, %s)',
        iterations, lat1, lon1, lat2, lon2
    )
    return LineResult.unsolved(iterations)
