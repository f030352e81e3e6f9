"""Geo Distance — verifies the haversine great-circle distance.

Tests:
    - Zero for identical points, symmetric in its arguments
    - One degree of latitude is ~111.19 km on the 6371 km sphere
    - Known city pair within a kilometre of the reference distance
"""

import pytest

from crave.core.geo import EARTH_RADIUS_KM, haversine_km


def test_identical_points_are_zero():
    assert haversine_km(40.7128, -74.006, 40.7128, -74.006) == 0


def test_distance_is_symmetric():
    a = haversine_km(40.0, -74.0, 41.0, -73.0)
    b = haversine_km(41.0, -73.0, 40.0, -74.0)
    assert a == pytest.approx(b)


def test_one_degree_latitude():
    assert haversine_km(40.0, -74.0, 41.0, -74.0) == pytest.approx(111.19, abs=0.01)


def test_equator_and_meridian_are_valid_points():
    assert haversine_km(0.0, 0.0, 0.0, 1.0) == pytest.approx(111.19, abs=0.01)


def test_antipodes_are_half_circumference():
    assert haversine_km(0.0, 0.0, 0.0, 180.0) == pytest.approx(3.141592653589793 * EARTH_RADIUS_KM)


def test_new_york_to_london():
    """Reference great-circle distance is ~5570 km."""
    d = haversine_km(40.7128, -74.0060, 51.5074, -0.1278)
    assert d == pytest.approx(5570, abs=10)
