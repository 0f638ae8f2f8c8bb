import math

import numpy as np
import pytest
from pytest import approx

from georeference import Ellipsoid, LatLngCoordinate, VincentyConvergenceError
from georeference.tracks import path_length, segment_distances, segment_lines


_DEGREE = 6378137. * math.radians(1.)


def test_segment_lines():
    points = [LatLngCoordinate(0., 0.), LatLngCoordinate(0., 1.), LatLngCoordinate(0., 1.)]
    lines = segment_lines(points)
    assert len(lines) == 2
    assert lines[0].distance == approx(_DEGREE, abs=1e-3)
    assert lines[1] is None


def test_segment_distances():
    points = [
        LatLngCoordinate(0., 0.),
        LatLngCoordinate(0., 1.),
        LatLngCoordinate(0., 1.),
        LatLngCoordinate(0., 2.),
    ]
    for method in ('orthodromic', 'loxodromic'):
        distances = segment_distances(points, method=method)
        assert isinstance(distances, np.ndarray)
        np.testing.assert_allclose(distances, [_DEGREE, 0., _DEGREE], atol=1e-3)


def test_path_length():
    points = [
        LatLngCoordinate(51.5074, -0.1278),
        LatLngCoordinate(48.8566, 2.3522),
        LatLngCoordinate(40.7128, -74.0060),
    ]
    wgs84 = Ellipsoid.wgs84()
    expected = sum(
        wgs84.calculate_loxodromic_line(x, y).distance
        for x, y in zip(points, points[1:])
    )
    assert path_length(points, method='loxodromic', ellipsoid=wgs84) == approx(expected)
    assert path_length(points) < path_length(points, method='loxodromic')


def test_segment_validation():
    points = [LatLngCoordinate(0., 0.), LatLngCoordinate(0., 1.)]

    with pytest.raises(ValueError):
        segment_distances(points, method='haversine')

    with pytest.raises(ValueError):
        segment_distances(points[:1])

    with pytest.raises(VincentyConvergenceError):
        segment_distances([LatLngCoordinate(0., 0.), LatLngCoordinate(0.5, 179.7)])


def test_segment_distances_warns_on_repeats(monkeypatch, caplog):
    monkeypatch.setattr('georeference.utils.logging._WARNINGS', set())
    points = [LatLngCoordinate(0., 0.), LatLngCoordinate(0., 1.), LatLngCoordinate(0., 1.)]

    segment_distances(points)
    assert 'repeated consecutive points' in caplog.text

    segment_distances(points, method='loxodromic')
    assert caplog.text.count('repeated consecutive points') == 1

    caplog.clear()
    segment_distances(points[:2])
    assert 'repeated consecutive points' not in caplog.text
