from concurrent.futures import ThreadPoolExecutor
import logging

import pytest

from georeference import (
    Ellipsoid, default_ellipsoid, get_default_ellipsoid, reset_default_ellipsoid,
    set_default_ellipsoid
)


@pytest.fixture(autouse=True)
def _reset_default():
    reset_default_ellipsoid()
    yield
    reset_default_ellipsoid()


def test_get_default_ellipsoid():
    ellipsoid = get_default_ellipsoid()
    assert ellipsoid == Ellipsoid.wgs84()
    assert get_default_ellipsoid() is ellipsoid


def test_get_default_ellipsoid_threaded():
    with ThreadPoolExecutor(max_workers=16) as pool:
        results = list(pool.map(lambda _: get_default_ellipsoid(), range(64)))

    assert len({id(x) for x in results}) == 1


def test_set_default_ellipsoid(caplog):
    caplog.set_level(logging.INFO, logger='georeference')
    grs80 = Ellipsoid.grs80()
    set_default_ellipsoid(grs80)
    assert get_default_ellipsoid() is grs80
    assert 'Default ellipsoid set to GRS80' in caplog.text

    with pytest.raises(TypeError):
        set_default_ellipsoid('WGS84')

    reset_default_ellipsoid()
    assert get_default_ellipsoid() == Ellipsoid.wgs84()


def test_default_ellipsoid_context():
    clarke = Ellipsoid.clarke1866()
    with default_ellipsoid(clarke) as ellipsoid:
        assert ellipsoid is clarke
        assert get_default_ellipsoid() is clarke

    assert get_default_ellipsoid() == Ellipsoid.wgs84()

    grs80 = Ellipsoid.grs80()
    set_default_ellipsoid(grs80)
    with pytest.raises(RuntimeError):
        with default_ellipsoid(clarke):
            raise RuntimeError('boom')

    assert get_default_ellipsoid() is grs80
