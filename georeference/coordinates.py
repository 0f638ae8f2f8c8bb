"""
Representation of a latitude/longitude pair on a reference ellipsoid
"""

__all__ = ['LatLngCoordinate']

from typing import Tuple, Union

from typing_extensions import Self

from georeference.utils.functions import round_half_up


class LatLngCoordinate:
    """
    An immutable latitude/longitude pair, in degrees.

    Unlike a map coordinate, values are stored exactly as given: no wrapping of
    longitudes across the antimeridian or of latitudes across the poles takes
    place. Callers are responsible for supplying sane values.
    """

    __slots__ = ('_latitude', '_longitude')

    def __init__(
        self,
        latitude: Union[float, int, str],
        longitude: Union[float, int, str],
    ):
        self._latitude = float(latitude)
        self._longitude = float(longitude)

    @property
    def latitude(self) -> float:
        return self._latitude

    @property
    def longitude(self) -> float:
        return self._longitude

    def __eq__(self, other):
        if not isinstance(other, LatLngCoordinate):
            return False

        return (
            self.latitude == other.latitude and
            self.longitude == other.longitude
        )

    def __hash__(self):
        return hash((self.latitude, self.longitude))

    def __repr__(self):
        return f'<LatLngCoordinate({self.latitude}, {self.longitude})>'

    @classmethod
    def from_dms(
        cls,
        lat: Tuple[int, int, float, str],
        lon: Tuple[int, int, float, str]
    ) -> Self:
        """
        Creates a coordinate from a Degree Minutes Seconds (lat, lon) pair.

        The quadrant value should consist of either 'N'/'S' (latitude) or 'E'/'W' (longitude)

        Args:
            lat:
                Latitude, as a 4-tuple of
                ( <degrees> (float),  <minutes> (float), <seconds> (float), <quadrant> (str) )
            lon:
                Longitude, as a 4-tuple of
                ( <degrees> (float),  <minutes> (float), <seconds> (float), <quadrant> (str) )

        Returns:
            LatLngCoordinate
        """
        def convert(dms: Tuple[int, int, float, str]):
            mult = -1 if dms[3] in ('S', 'W') else 1
            return mult * (dms[0] + (dms[1] / 60) + (dms[2] / 3600))

        return cls(convert(lat), convert(lon))

    def to_dms(self) -> Tuple[Tuple[int, int, float, str], Tuple[int, int, float, str]]:
        """
        Convert the coordinate to a pair of (degrees, minutes, seconds, hemisphere)
        tuples, latitude first.

        Returns:
            converted values as ((d, m, s, 'N'|'S'), (d, m, s, 'E'|'W'))
        """
        def convert(dd: float) -> Tuple[int, int, float]:
            """Converts a Decimal Degree to Degrees Minutes Seconds"""
            minutes, seconds = divmod(abs(dd) * 3600, 60)
            degrees, minutes = divmod(minutes, 60)
            return int(degrees), int(minutes), round_half_up(seconds, 5)

        return (
            (*convert(self.latitude), 'N' if self.latitude >= 0 else 'S'),
            (*convert(self.longitude), 'E' if self.longitude >= 0 else 'W'),
        )

    def to_float(self) -> Tuple[float, float]:
        """Returns the coordinate as a (latitude, longitude) tuple"""
        return self.latitude, self.longitude
