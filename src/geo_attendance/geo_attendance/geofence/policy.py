from __future__ import annotations

import math

from ..core.constants import EARTH_RADIUS_METERS
from ..settings.model import OfficeLocation


def distance_meters(lat1: float, lng1: float, lat2: float, lng2: float) -> float:
    """Great-circle (haversine) distance between two WGS84 points."""
    phi1, phi2 = math.radians(lat1), math.radians(lat2)
    d_phi = math.radians(lat2 - lat1)
    d_lambda = math.radians(lng2 - lng1)

    a = math.sin(d_phi / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(d_lambda / 2) ** 2
    return 2 * EARTH_RADIUS_METERS * math.asin(min(1.0, math.sqrt(a)))


def is_within_geofence(office: OfficeLocation, latitude: float, longitude: float) -> bool:
    return distance_meters(office.latitude, office.longitude, latitude, longitude) <= office.radius
