"""Geo Distance: great-circle distance between two coordinates.

Invariants:
    - haversine_km uses a spherical Earth with R = 6371 km
    - Result is symmetric and zero for identical points
"""

import math

from crave.core.domain_types import DistanceKm

EARTH_RADIUS_KM: float = 6371.0


def haversine_km(
    lat1: float, lon1: float, lat2: float, lon2: float,
) -> DistanceKm:
    """Distance in km between (lat1, lon1) and (lat2, lon2), degrees in."""
    d_lat = math.radians(lat2 - lat1)
    d_lon = math.radians(lon2 - lon1)
    a = (
        math.sin(d_lat / 2) * math.sin(d_lat / 2)
        + math.cos(math.radians(lat1)) * math.cos(math.radians(lat2))
        * math.sin(d_lon / 2) * math.sin(d_lon / 2)
    )
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return DistanceKm(EARTH_RADIUS_KM * c)
