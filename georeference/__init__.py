from georeference._version import __version__  # noqa: F401
from georeference.utils.logging import LOGGER
from georeference.coordinates import LatLngCoordinate
from georeference.lines import GeodeticLine, LineResult, LineStatus, VincentyConvergenceError
from georeference.ellipsoid import Ellipsoid
from georeference.config import (
    default_ellipsoid, get_default_ellipsoid, reset_default_ellipsoid, set_default_ellipsoid
)
from georeference.geodesy import loxodromic, meridional_distance, meridional_parts, orthodromic
from georeference.tracks import path_length, segment_distances


__all__ = [
    'Ellipsoid',
    'GeodeticLine',
    'LatLngCoordinate',
    'LineResult',
    'LineStatus',
    'VincentyConvergenceError',
    'default_ellipsoid',
    'get_default_ellipsoid',
    'loxodromic',
    'meridional_distance',
    'meridional_parts',
    'orthodromic',
    'path_length',
    'reset_default_ellipsoid',
    'segment_distances',
    'set_default_ellipsoid',
    'LOGGER',
]
