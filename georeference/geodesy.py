"""
Function interface to the line solvers. Every function takes an optional
ellipsoid; when omitted, the configured default (WGS84 unless overridden) is used.
"""

__all__ = ['loxodromic', 'meridional_distance', 'meridional_parts', 'orthodromic']

from typing import Optional, Union

import numpy as np

from georeference import meridional as _meridional
from georeference.config import get_default_ellipsoid
from georeference.ellipsoid import Ellipsoid
from georeference.lines import LineResult
from georeference.loxodromic import solve_loxodromic
from georeference.orthodromic import solve_orthodromic


def orthodromic(
    lat1: float,
    lon1: float,
    lat2: float,
    lon2: float,
    ellipsoid: Optional[Ellipsoid] = None,
) -> LineResult:
    """Solve the great-circle (geodesic) line between two points given in degrees"""
    return solve_orthodromic(ellipsoid or get_default_ellipsoid(), lat1, lon1, lat2, lon2)


def loxodromic(
    lat1: float,
    lon1: float,
    lat2: float,
    lon2: float,
    ellipsoid: Optional[Ellipsoid] = None,
) -> LineResult:
    """Solve the rhumb line between two points given in degrees"""
    return solve_loxodromic(ellipsoid or get_default_ellipsoid(), lat1, lon1, lat2, lon2)


def meridional_parts(
    latitude: Union[float, np.ndarray],
    ellipsoid: Optional[Ellipsoid] = None,
) -> Union[float, np.ndarray]:
    """Meridional parts of a latitude (degrees), in nautical miles"""
    return _meridional.meridional_parts(ellipsoid or get_default_ellipsoid(), latitude)


def meridional_distance(
    latitude: Union[float, np.ndarray],
    ellipsoid: Optional[Ellipsoid] = None,
) -> Union[float, np.ndarray]:
    """Distance along a meridian from the equator to a latitude (degrees), in meters"""
    return _meridional.meridional_distance(ellipsoid or get_default_ellipsoid(), latitude)
