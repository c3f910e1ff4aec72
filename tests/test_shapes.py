"""
Tests for geometry value objects.
"""

import math

import numpy as np
import pytest

from territory_core import Bounds, Coordinate, Ring
from territory_core.geometry import bounds_of


def test_coordinate_coerces_to_float():
    c = Coordinate(latitude=40, longitude=np.int64(-3))
    assert c.latitude == 40.0 and isinstance(c.latitude, float)
    assert c.longitude == -3.0 and isinstance(c.longitude, float)


@pytest.mark.parametrize("latitude, longitude, error", [
    (math.nan, 0, ValueError),
    (0, math.inf, ValueError),
    ("40", 0, TypeError),
    (True, 0, TypeError),
    (None, 0, TypeError),
])
def test_coordinate_rejects_invalid_values(latitude, longitude, error):
    with pytest.raises(error):
        Coordinate(latitude=latitude, longitude=longitude)


def test_coordinate_is_immutable():
    c = Coordinate(1, 2)
    with pytest.raises(AttributeError):
        c.latitude = 5


def test_coordinate_serialization():
    c = Coordinate(1.5, -2.5)
    assert c.to_pair() == (1.5, -2.5)
    assert c.to_dict() == {'latitude': 1.5, 'longitude': -2.5}


def test_ring_requires_three_coordinates():
    with pytest.raises(ValueError, match="at least 3"):
        Ring.from_pairs([(0, 0), (1, 1)])


def test_ring_requires_coordinate_elements():
    with pytest.raises(TypeError):
        Ring(((0, 0), (0, 1), (1, 1)))


def test_ring_freezes_list_input():
    ring = Ring([Coordinate(0, 0), Coordinate(0, 1), Coordinate(1, 1)])
    assert isinstance(ring.coordinates, tuple)
    assert hash(ring) == hash(Ring.from_pairs([(0, 0), (0, 1), (1, 1)]))


def test_ring_sequence_protocol():
    ring = Ring.from_pairs([(0, 0), (0, 1), (1, 1), (0, 0)])

    assert len(ring) == 4
    assert list(ring)[1] == Coordinate(0, 1)
    assert ring[2] == Coordinate(1, 1)
    assert ring.first == ring.last
    assert ring.is_closed


def test_open_ring_is_not_closed():
    assert not Ring.from_pairs([(0, 0), (0, 1), (1, 1)]).is_closed


def test_ring_to_array_is_read_only():
    ring = Ring.from_pairs([(10, 20), (11, 21), (12, 22)])

    array = ring.to_array()

    assert array.shape == (3, 2)
    assert array.dtype == np.float64
    np.testing.assert_array_equal(array[:, 0], [10, 11, 12])
    with pytest.raises(ValueError):
        array[0, 0] = 99


def test_ring_lat_lng_pairs():
    ring = Ring.from_pairs([(10, 20), (11, 21), (12, 22)])
    assert ring.to_lat_lng_pairs() == [(10.0, 20.0), (11.0, 21.0), (12.0, 22.0)]


def test_ring_bounds():
    ring = Ring.from_pairs([(10, 20), (12, 19), (11, 25)])

    assert ring.bounds() == Bounds(min_lat=10, min_lon=19, max_lat=12, max_lon=25)


def test_bounds_center_and_contains():
    bounds = Bounds(min_lat=0, min_lon=0, max_lat=2, max_lon=4)

    assert bounds.center == Coordinate(1, 2)
    assert bounds.contains(Coordinate(2, 4))
    assert not bounds.contains(Coordinate(2.1, 1))


def test_bounds_rejects_inverted_box():
    with pytest.raises(ValueError):
        Bounds(min_lat=1, min_lon=0, max_lat=0, max_lon=1)


def test_bounds_of_multiple_rings():
    a = Ring.from_pairs([(0, 0), (0, 1), (1, 1)])
    b = Ring.from_pairs([(-2, 5), (3, 5), (3, 6)])

    assert bounds_of([a, b]) == Bounds(min_lat=-2, min_lon=0, max_lat=3, max_lon=6)
    assert bounds_of([]) is None
