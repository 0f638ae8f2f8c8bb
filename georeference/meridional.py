"""
Meridional series used by rhumb-line calculations. Both functions accept either
a single latitude or a numpy array of latitudes, in degrees.
"""

from __future__ import annotations

__all__ = ['meridional_distance', 'meridional_parts']

from typing import TYPE_CHECKING, Union

import numpy as np

from georeference._const import NAUTICAL_MILE

if TYPE_CHECKING:  # pragma: no cover
    from georeference.ellipsoid import Ellipsoid


_LATITUDE_TYPE = Union[float, np.ndarray]


def meridional_parts(ellipsoid: Ellipsoid, latitude: _LATITUDE_TYPE) -> _LATITUDE_TYPE:
    """
    Calculate the Mercator meridional parts of a latitude: the distance from the
    equator on a Mercator chart, in nautical miles.

    Args:
        ellipsoid:
            The reference ellipsoid

        latitude:
            Latitude(s) in degrees

    Returns:
        Meridional parts in nautical miles. The south pole yields -inf.
    """
    lat = np.radians(latitude)
    ecc = ellipsoid.eccentricity
    e_sin = ecc * np.sin(lat)

    # tan(pi/4 + lat/2) reaches exactly zero at -90 degrees
    with np.errstate(divide='ignore'):
        parts = ellipsoid.equatorial_axis * (
            np.log(np.tan(0.5 * lat + np.pi / 4.0)) +
            (ecc / 2.0) * np.log((1 - e_sin) / (1 + e_sin))
        )

    return parts / NAUTICAL_MILE


def meridional_distance(ellipsoid: Ellipsoid, latitude: _LATITUDE_TYPE) -> _LATITUDE_TYPE:
    """
    Calculate the arc length along a meridian from the equator to a latitude,
    using an eighth order series in the squared eccentricity.

    Args:
        ellipsoid:
            The reference ellipsoid

        latitude:
            Latitude(s) in degrees

    Returns:
        Signed distance(s) in meters
    """
    lat = np.radians(latitude)
    e2 = ellipsoid.eccentricity ** 2

    b0 = 1 - (e2 / 4) * (1 + (e2 / 16) * (3 + (5 * e2 / 4) * (1 + 35 * e2 / 64)))
    b2 = -(3 / 8.0) * (1 + (e2 / 4) * (1 + (15 * e2 / 32) * (1 + 7 * e2 / 12)))
    b4 = (15 / 256.0) * (1 + (3 * e2 / 4) * (1 + 35 * e2 / 48))
    b6 = -(35 / 3072.0) * (1 + 5 * e2 / 4)
    b8 = 315 / 131072.0

    dist = b0 * lat + e2 * (
        b2 * np.sin(2 * lat) + e2 * (
            b4 * np.sin(4 * lat) + e2 * (
                b6 * np.sin(6 * lat) + e2 * (
                    b8 * np.sin(8 * lat)
                )
            )
        )
    )
    return dist * ellipsoid.equatorial_axis
