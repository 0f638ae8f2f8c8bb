import pytest

from georeference import LatLngCoordinate

from tests.functions import assert_coordinates_equal


def test_coordinate_init():
    c = LatLngCoordinate(1., 0.)
    assert c.latitude == 1.
    assert c.longitude == 0.

    c = LatLngCoordinate('1.0', '0.0')
    assert c.latitude == 1.
    assert c.longitude == 0.

    c = LatLngCoordinate(1, 2)
    assert isinstance(c.latitude, float)
    assert isinstance(c.longitude, float)

    # No normalization of out-of-range values
    c = LatLngCoordinate(91., 361.)
    assert c.to_float() == (91., 361.)


def test_coordinate_immutable():
    c = LatLngCoordinate(1., 0.)
    with pytest.raises(AttributeError):
        c.latitude = 5.

    with pytest.raises(AttributeError):
        c.altitude = 5.


def test_coordinate_hash():
    coords = [
        LatLngCoordinate(0., 0.),
        LatLngCoordinate(0., 0.),
        LatLngCoordinate(1., 1.)
    ]
    assert len(set(coords)) == 2
    assert LatLngCoordinate(0., 0.) in set(coords)


def test_coordinate_eq():
    assert LatLngCoordinate(0., 0.) == LatLngCoordinate(0., 0.)
    assert LatLngCoordinate(0., 1.) != LatLngCoordinate(1., 0.)
    assert LatLngCoordinate(0., 0.) != (0., 0.)


def test_coordinate_repr():
    assert repr(LatLngCoordinate(1., 0.)) == '<LatLngCoordinate(1.0, 0.0)>'


def test_coordinate_to_float():
    assert LatLngCoordinate(1., 0.).to_float() == (1.0, 0.0)


def test_coordinate_to_dms():
    assert LatLngCoordinate(51.509865, -0.118092).to_dms() == (
        (51, 30, 35.514, 'N'), (0, 7, 5.1312, 'W')
    )


def test_coordinate_from_dms():
    assert LatLngCoordinate.from_dms((0, 0, 0.0, 'N'), (0, 0, 0.0, 'E')) == LatLngCoordinate(0., 0.)
    assert_coordinates_equal(
        LatLngCoordinate.from_dms((51, 30, 35.514, 'N'), (0, 7, 5.1312, 'W')),
        LatLngCoordinate(51.509865, -0.118092),
    )
