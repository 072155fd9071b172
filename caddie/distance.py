from math import atan2, cos, radians, sin, sqrt

from models.coordinate import Coordinate

EARTH_RADIUS_M = 6_371_000.0
YARDS_PER_METER = 1.09361


def haversine_m(a: Coordinate, b: Coordinate) -> float:
    """Great-circle distance between two map points in meters."""
    lat1 = radians(a.lat)
    lat2 = radians(b.lat)
    dlat = lat2 - lat1
    dlon = radians(b.lng - a.lng)

    h = sin(dlat / 2) ** 2 + cos(lat1) * cos(lat2) * sin(dlon / 2) ** 2
    # rounding can push h past 1 for antipodal points
    h = min(1.0, h)
    c = 2 * atan2(sqrt(h), sqrt(1 - h))
    return EARTH_RADIUS_M * c


def distance_yards(a: Coordinate, b: Coordinate) -> float:
    """Great-circle distance in yards. Symmetric, 0 for identical points."""
    return haversine_m(a, b) * YARDS_PER_METER
