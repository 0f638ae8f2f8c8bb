"""
Distances along sequences of points, e.g. the fixes of a GPS track
"""

__all__ = ['path_length', 'segment_distances', 'segment_lines']

from typing import Callable, Dict, List, Literal, Optional, Sequence

import numpy as np

from georeference.config import get_default_ellipsoid
from georeference.coordinates import LatLngCoordinate
from georeference.ellipsoid import Ellipsoid
from georeference.lines import GeodeticLine, LineResult
from georeference.loxodromic import solve_loxodromic
from georeference.orthodromic import solve_orthodromic
from georeference.utils.logging import warn_once


_METHOD_TYPE = Literal['orthodromic', 'loxodromic']

_SOLVERS: Dict[str, Callable[..., LineResult]] = {
    'orthodromic': solve_orthodromic,
    'loxodromic': solve_loxodromic,
}


def segment_lines(
    points: Sequence[LatLngCoordinate],
    method: _METHOD_TYPE = 'orthodromic',
    ellipsoid: Optional[Ellipsoid] = None,
) -> List[Optional[GeodeticLine]]:
    """
    Solve the line between each pair of consecutive points. The length of the
    returned list will always be len(points) - 1.

    Args:
        points:
            The ordered points

        method:
            'orthodromic' or 'loxodromic'

        ellipsoid:
            (Default: the configured default ellipsoid)

    Returns:
        List of GeodeticLines, with None where consecutive points coincide

    Raises:
        VincentyConvergenceError: an orthodromic segment could not be solved
    """
    if method not in _SOLVERS:
        raise ValueError(f"Unknown method '{method}'. Options: {list(_SOLVERS.keys())}")

    if len(points) < 2:
        raise ValueError('Cannot compute segments between fewer than two points.')

    solver = _SOLVERS[method]
    ellipsoid = ellipsoid or get_default_ellipsoid()
    return [
        solver(ellipsoid, x.latitude, x.longitude, y.latitude, y.longitude).unwrap()
        for x, y in zip(points, points[1:])
    ]


def segment_distances(
    points: Sequence[LatLngCoordinate],
    method: _METHOD_TYPE = 'orthodromic',
    ellipsoid: Optional[Ellipsoid] = None,
) -> np.ndarray:
    """Provides an array of the distances (in meters) between consecutive points.
    Coincident consecutive points contribute 0."""
    lines = segment_lines(points, method, ellipsoid)
    if any(line is None for line in lines):
        warn_once(
            'Track contains repeated consecutive points; their segments count as zero '
            'length. This warning will not repeat.'
        )

    return np.array([0.0 if line is None else line.distance for line in lines])


def path_length(
    points: Sequence[LatLngCoordinate],
    method: _METHOD_TYPE = 'orthodromic',
    ellipsoid: Optional[Ellipsoid] = None,
) -> float:
    """Total length (in meters) of the path through the points, in order"""
    return float(np.sum(segment_distances(points, method, ellipsoid)))
