"""Great-circle distance and geofence membership.

Pure functions; callers are responsible for range-checking coordinates.
"""
from __future__ import annotations

import math

from ..core.constants import EARTH_RADIUS_M
from .model import Coordinate, Site


def distance_meters(a: Coordinate, b: Coordinate) -> float:
    """Haversine distance in meters on a sphere of radius 6,371,000 m."""
    lat1 = math.radians(a.latitude)
    lat2 = math.radians(b.latitude)
    d_lat = math.radians(b.latitude - a.latitude)
    d_lng = math.radians(b.longitude - a.longitude)

    h = math.sin(d_lat / 2) ** 2 + math.cos(lat1) * math.cos(lat2) * math.sin(d_lng / 2) ** 2
    # Float error can push h marginally past 1 near antipodes.
    h = min(1.0, max(0.0, h))
    return EARTH_RADIUS_M * 2 * math.atan2(math.sqrt(h), math.sqrt(1 - h))


def is_within_range(point: Coordinate, site: Site) -> bool:
    return distance_meters(point, site.center) <= site.radius_m
