import math

import numpy as np
import pytest
from pytest import approx

from georeference import Ellipsoid
from georeference.ellipsoid import PRESETS
from georeference.meridional import meridional_distance, meridional_parts


def test_meridional_distance():
    wgs84 = Ellipsoid.wgs84()
    assert meridional_distance(wgs84, 0.) == 0.

    # Quarter meridian
    assert meridional_distance(wgs84, 90.) == approx(10001965.729, abs=1e-2)
    assert meridional_distance(wgs84, -90.) == approx(-10001965.729, abs=1e-2)
    assert meridional_distance(wgs84, -37.5) == -meridional_distance(wgs84, 37.5)


def test_meridional_distance_sphere():
    sphere = Ellipsoid('sphere', 6371000., math.inf)
    assert meridional_distance(sphere, 45.) == approx(6371000. * math.pi / 4, rel=1e-12)


@pytest.mark.parametrize('name', list(PRESETS.keys()))
def test_meridional_distance_monotonic(name):
    ellipsoid = Ellipsoid.from_name(name)
    distances = meridional_distance(ellipsoid, np.linspace(0., 89.99, 1000))
    assert np.all(np.diff(distances) > 0)


def test_meridional_parts():
    wgs84 = Ellipsoid.wgs84()
    assert meridional_parts(wgs84, 0.) == approx(0., abs=1e-9)
    assert meridional_parts(wgs84, -30.) == approx(-meridional_parts(wgs84, 30.), rel=1e-12)
    assert meridional_parts(wgs84, 60.) > meridional_parts(wgs84, 30.) > 0.

    # The south pole is infinitely far down a Mercator chart
    assert meridional_parts(wgs84, -90.) == -np.inf


def test_meridional_parts_sphere():
    sphere = Ellipsoid('sphere', 6371000., math.inf)
    expected = 6371000. * math.log(math.tan(math.pi / 4 + math.radians(45.) / 2)) / 1852
    assert meridional_parts(sphere, 45.) == approx(expected, rel=1e-12)


def test_meridional_vectorized():
    wgs84 = Ellipsoid.wgs84()
    latitudes = np.array([-60., 0., 12.5, 45., 89.])

    np.testing.assert_allclose(
        meridional_parts(wgs84, latitudes),
        [meridional_parts(wgs84, x) for x in latitudes],
    )
    np.testing.assert_allclose(
        meridional_distance(wgs84, latitudes),
        [meridional_distance(wgs84, x) for x in latitudes],
    )
