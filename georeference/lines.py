"""
Result types produced by the orthodromic and loxodromic line solvers
"""

__all__ = ['GeodeticLine', 'LineResult', 'LineStatus', 'VincentyConvergenceError']

from enum import Enum
from typing import Optional

from georeference.coordinates import LatLngCoordinate


class VincentyConvergenceError(ArithmeticError):
    """
    Raised when the Vincenty inverse solution neither converges nor falls into one
    of its degenerate cases (typically nearly antipodal points).
    """


class GeodeticLine:
    """
    The line between two points on an ellipsoid, as computed by one of the line
    solvers.

    Args:
        point1:
            The start point

        point2:
            The end point

        distance:
            Length of the line, in meters

        initial_bearing:
            Bearing at point1 toward point2, in degrees clockwise from true north

        final_bearing:
            Bearing at point2 back toward point1 (the reverse azimuth), in degrees
            clockwise from true north
    """

    __slots__ = ('_point1', '_point2', '_distance', '_initial_bearing', '_final_bearing')

    def __init__(
        self,
        point1: LatLngCoordinate,
        point2: LatLngCoordinate,
        distance: float,
        initial_bearing: float,
        final_bearing: float,
    ):
        self._point1 = point1
        self._point2 = point2
        self._distance = float(distance)
        self._initial_bearing = float(initial_bearing)
        self._final_bearing = float(final_bearing)

    @property
    def point1(self) -> LatLngCoordinate:
        return self._point1

    @property
    def point2(self) -> LatLngCoordinate:
        return self._point2

    @property
    def distance(self) -> float:
        return self._distance

    @property
    def initial_bearing(self) -> float:
        return self._initial_bearing

    @property
    def final_bearing(self) -> float:
        return self._final_bearing

    def __eq__(self, other):
        if not isinstance(other, GeodeticLine):
            return False

        return (
            self.point1 == other.point1 and
            self.point2 == other.point2 and
            self.distance == other.distance and
            self.initial_bearing == other.initial_bearing and
            self.final_bearing == other.final_bearing
        )

    def __hash__(self):
        return hash((
            self.point1, self.point2, self.distance,
            self.initial_bearing, self.final_bearing
        ))

    def __repr__(self):
        return (
            f'<GeodeticLine({self.point1!r} -> {self.point2!r}, '
            f'{self.distance} m, {self.initial_bearing}/{self.final_bearing} deg)>'
        )


class LineStatus(Enum):
    """Outcome of a line solver call"""
    SOLVED = 'solved'
    DEGENERATE = 'degenerate'
    UNSOLVED = 'unsolved'


class LineResult:
    """
    Tagged outcome of a line solver call. Only a SOLVED result carries a line;
    DEGENERATE means the two points coincide and UNSOLVED means the algorithm
    could not produce an answer for the pair.
    """

    __slots__ = ('_status', '_line', '_iterations')

    def __init__(
        self,
        status: LineStatus,
        line: Optional[GeodeticLine] = None,
        iterations: int = 0,
    ):
        if (status is LineStatus.SOLVED) != (line is not None):
            raise ValueError('Only a solved result may, and must, carry a line.')

        self._status = status
        self._line = line
        self._iterations = iterations

    @classmethod
    def solved(cls, line: GeodeticLine, iterations: int = 0) -> 'LineResult':
        return cls(LineStatus.SOLVED, line, iterations)

    @classmethod
    def degenerate(cls, iterations: int = 0) -> 'LineResult':
        return cls(LineStatus.DEGENERATE, iterations=iterations)

    @classmethod
    def unsolved(cls, iterations: int = 0) -> 'LineResult':
        return cls(LineStatus.UNSOLVED, iterations=iterations)

    @property
    def status(self) -> LineStatus:
        return self._status

    @property
    def line(self) -> Optional[GeodeticLine]:
        return self._line

    @property
    def iterations(self) -> int:
        """Number of Vincenty iterations run; always 0 for closed-form solvers"""
        return self._iterations

    @property
    def is_solved(self) -> bool:
        return self._status is LineStatus.SOLVED

    def unwrap(self) -> Optional[GeodeticLine]:
        """
        Returns the line for a solved result, or None when the points coincide.

        Raises:
            VincentyConvergenceError: the result is unsolved
        """
        if self._status is LineStatus.UNSOLVED:
            raise VincentyConvergenceError(
                f'No solution after {self._iterations} iterations; '
                'points are likely nearly antipodal.'
            )

        return self._line

    def __eq__(self, other):
        if not isinstance(other, LineResult):
            return False

        return (
            self.status is other.status and
            self.line == other.line and
            self.iterations == other.iterations
        )

    def __hash__(self):
        return hash((self.status, self.line, self.iterations))

    def __repr__(self):
        if self._line is None:
            return f'<LineResult({self._status.value})>'
        return f'<LineResult({self._status.value}, {self._line!r})>'
