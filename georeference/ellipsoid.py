"""
Reference ellipsoid model and its line calculations
"""

from __future__ import annotations

__all__ = ['Ellipsoid', 'PRESETS']

import math
from typing import Callable, Dict, Optional, Tuple, Union

import numpy as np
from pydantic import validate_call

from georeference import _const
from georeference.coordinates import LatLngCoordinate
from georeference.lines import GeodeticLine, LineResult
from georeference.loxodromic import solve_loxodromic
from georeference.meridional import meridional_distance, meridional_parts
from georeference.orthodromic import solve_orthodromic


_POINT_ARGS = Union[LatLngCoordinate, float]


def _unpack_points(args: Tuple[_POINT_ARGS, ...]) -> Tuple[float, float, float, float]:
    """Accepts either (point1, point2) or (lat1, lon1, lat2, lon2)"""
    if len(args) == 2 and all(isinstance(x, LatLngCoordinate) for x in args):
        point1, point2 = args
        return point1.latitude, point1.longitude, point2.latitude, point2.longitude

    if len(args) == 4 and not any(isinstance(x, LatLngCoordinate) for x in args):
        lat1, lon1, lat2, lon2 = (float(x) for x in args)  # type: ignore
        return lat1, lon1, lat2, lon2

    raise TypeError(
        'Expected two LatLngCoordinates or four degree values (lat1, lon1, lat2, lon2).'
    )


class Ellipsoid:
    """
    An oblate spheroid model of a planetary body, defined by its equatorial
    axis and inverse flattening. All derived shape parameters are fixed at
    construction.

    Args:
        name:
            A display name for the ellipsoid

        equatorial_axis:
            The semi-major axis, in meters

        inverse_flattening:
            1 / flattening. Use math.inf for a sphere.
    """

    @validate_call
    def __init__(self, name: str, equatorial_axis: float, inverse_flattening: float):
        if math.isnan(equatorial_axis) or equatorial_axis <= 0:
            raise ValueError(f'equatorial axis must be positive, not {equatorial_axis}')

        if math.isnan(inverse_flattening) or inverse_flattening <= 0:
            raise ValueError(f'inverse flattening must be positive, not {inverse_flattening}')

        self._name = name
        self._equatorial_axis = equatorial_axis
        self._inverse_flattening = inverse_flattening
        self._flattening = 1 / inverse_flattening
        self._polar_axis = equatorial_axis * (1 - 1 / inverse_flattening)
        self._eccentricity = math.sqrt(2 * self._flattening - self._flattening ** 2)

    def __eq__(self, other):
        if not isinstance(other, Ellipsoid):
            return False

        return (
            self.name == other.name and
            self.equatorial_axis == other.equatorial_axis and
            self.inverse_flattening == other.inverse_flattening
        )

    def __hash__(self):
        return hash((self.name, self.equatorial_axis, self.inverse_flattening))

    def __repr__(self):
        return f'<Ellipsoid {self.name} ({self.equatorial_axis}, 1/{self.inverse_flattening})>'

    @property
    def name(self) -> str:
        return self._name

    @property
    def equatorial_axis(self) -> float:
        return self._equatorial_axis

    @property
    def polar_axis(self) -> float:
        return self._polar_axis

    @property
    def flattening(self) -> float:
        return self._flattening

    @property
    def inverse_flattening(self) -> float:
        return self._inverse_flattening

    @property
    def eccentricity(self) -> float:
        return self._eccentricity

    @property
    def is_sphere(self) -> bool:
        return abs(self.equatorial_axis - self.polar_axis) < _const.DOUBLE_EPSILON

    @classmethod
    def wgs84(cls) -> Ellipsoid:
        return cls('WGS84', *_const.WGS84)

    @classmethod
    def grs80(cls) -> Ellipsoid:
        return cls('GRS80', *_const.GRS80)

    @classmethod
    def international1924(cls) -> Ellipsoid:
        return cls('International 1924', *_const.INTERNATIONAL_1924)

    @classmethod
    def clarke1866(cls) -> Ellipsoid:
        return cls('Clarke 1866', *_const.CLARKE_1866)

    @classmethod
    def from_name(cls, name: str) -> Ellipsoid:
        """
        Create a preset ellipsoid by name, e.g. 'WGS84' or 'international 1924'.
        Case and whitespace are ignored.
        """
        key = ''.join(name.split()).upper()
        if key not in PRESETS:
            raise ValueError(f"Unknown ellipsoid '{name}'. Options: {list(PRESETS.keys())}")

        return PRESETS[key]()

    def solve_orthodromic(self, *points: _POINT_ARGS) -> LineResult:
        """
        Solve for the great-circle (geodesic) line between two points, as a
        tagged result.

        Args:
            *points:
                Either two LatLngCoordinates, or lat1, lon1, lat2, lon2 in degrees

        Returns:
            LineResult
        """
        return solve_orthodromic(self, *_unpack_points(points))

    def solve_loxodromic(self, *points: _POINT_ARGS) -> LineResult:
        """
        Solve for the rhumb line between two points, as a tagged result.

        Args:
            *points:
                Either two LatLngCoordinates, or lat1, lon1, lat2, lon2 in degrees

        Returns:
            LineResult
        """
        return solve_loxodromic(self, *_unpack_points(points))

    def calculate_orthodromic_line(self, *points: _POINT_ARGS) -> Optional[GeodeticLine]:
        """
        Calculate the great-circle (geodesic) line between two points.

        Args:
            *points:
                Either two LatLngCoordinates, or lat1, lon1, lat2, lon2 in degrees

        Returns:
            GeodeticLine, or None if the points coincide

        Raises:
            VincentyConvergenceError: no solution could be found (nearly antipodal points)
        """
        return self.solve_orthodromic(*points).unwrap()

    def calculate_loxodromic_line(self, *points: _POINT_ARGS) -> Optional[GeodeticLine]:
        """
        Calculate the rhumb line between two points.

        Args:
            *points:
                Either two LatLngCoordinates, or lat1, lon1, lat2, lon2 in degrees

        Returns:
            GeodeticLine, or None if the points coincide
        """
        return self.solve_loxodromic(*points).unwrap()

    def calculate_meridional_parts(
        self, latitude: Union[float, np.ndarray]
    ) -> Union[float, np.ndarray]:
        """Meridional parts of a latitude (degrees), in nautical miles"""
        return meridional_parts(self, latitude)

    def calculate_meridional_distance(
        self, latitude: Union[float, np.ndarray]
    ) -> Union[float, np.ndarray]:
        """Distance along a meridian from the equator to a latitude (degrees), in meters"""
        return meridional_distance(self, latitude)


PRESETS: Dict[str, Callable[[], Ellipsoid]] = {
    'WGS84': Ellipsoid.wgs84,
    'GRS80': Ellipsoid.grs80,
    'INTERNATIONAL1924': Ellipsoid.international1924,
    'CLARKE1866': Ellipsoid.clarke1866,
}
