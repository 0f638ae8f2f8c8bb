"""
Process-wide default ellipsoid, used wherever a caller does not supply one.
Defaults to WGS84 until overridden.
"""

__all__ = [
    'default_ellipsoid', 'get_default_ellipsoid', 'reset_default_ellipsoid',
    'set_default_ellipsoid',
]

from contextlib import contextmanager
import threading
from typing import Iterator, Optional

from georeference.ellipsoid import Ellipsoid
from georeference.utils.logging import LOGGER


_DEFAULT: Optional[Ellipsoid] = None
_LOCK = threading.Lock()


def get_default_ellipsoid() -> Ellipsoid:
    """Returns the configured default ellipsoid, creating WGS84 on first use"""
    global _DEFAULT

    ellipsoid = _DEFAULT
    if ellipsoid is None:
        with _LOCK:
            if _DEFAULT is None:
                _DEFAULT = Ellipsoid.wgs84()
            ellipsoid = _DEFAULT

    return ellipsoid


def set_default_ellipsoid(ellipsoid: Ellipsoid) -> None:
    """
    Set the global default ellipsoid.

    Args:
        ellipsoid:
            The Ellipsoid to use wherever none is supplied explicitly
    """
    global _DEFAULT

    if not isinstance(ellipsoid, Ellipsoid):
        raise TypeError(f'Default ellipsoid must be an Ellipsoid, not {type(ellipsoid)}')

    with _LOCK:
        _DEFAULT = ellipsoid
    LOGGER.info('Default ellipsoid set to %s', ellipsoid.name)


def reset_default_ellipsoid() -> None:
    """Returns to the lazily-created WGS84 default"""
    global _DEFAULT

    with _LOCK:
        _DEFAULT = None


@contextmanager
def default_ellipsoid(ellipsoid: Ellipsoid) -> Iterator[Ellipsoid]:
    """
    Temporarily install a default ellipsoid for the duration of a block.

    Usage:
        with default_ellipsoid(Ellipsoid.grs80()):
            orthodromic(0., 0., 1., 1.)
    """
    global _DEFAULT

    with _LOCK:
        previous = _DEFAULT

    set_default_ellipsoid(ellipsoid)
    try:
        yield ellipsoid
    finally:
        with _LOCK:
            _DEFAULT = previous
