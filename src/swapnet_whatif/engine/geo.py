"""Geographic helpers — great-circle distance and short bearing offsets.

Pure math on ``GeoPoint`` values.  ``offset_point`` uses the equirectangular
approximation (111 km per degree), which is only meant for offsets of a
couple of kilometres where curvature error is negligible.
"""

from __future__ import annotations

import math

from swapnet_whatif.models.station import GeoPoint

EARTH_RADIUS_KM = 6371.0
"""Mean Earth radius used by the haversine formula (no ellipsoid correction)."""

KM_PER_DEGREE = 111.0
"""Approximate length of one degree of latitude (km)."""


def distance_km(a: GeoPoint, b: GeoPoint) -> float:
    """Haversine great-circle distance between two points, in km."""
    lat1 = math.radians(a.lat)
    lat2 = math.radians(b.lat)
    d_lat = lat2 - lat1
    d_lon = math.radians(b.lon - a.lon)

    h = (
        math.sin(d_lat / 2) ** 2
        + math.cos(lat1) * math.cos(lat2) * math.sin(d_lon / 2) ** 2
    )
    c = 2 * math.atan2(math.sqrt(h), math.sqrt(1 - h))
    return EARTH_RADIUS_KM * c


def offset_point(
    origin: GeoPoint | None,
    bearing_rad: float,
    distance_km: float,
) -> GeoPoint | None:
    """Displace ``origin`` by ``distance_km`` along ``bearing_rad``.

    Bearing is measured clockwise from north (0 = north, π/2 = east).

    Returns ``None`` when the origin is missing or sits on a pole, where a
    longitude offset is undefined.
    """
    if origin is None:
        return None

    cos_lat = math.cos(math.radians(origin.lat))
    if abs(cos_lat) < 1e-12:
        return None

    lat_offset = (distance_km / KM_PER_DEGREE) * math.cos(bearing_rad)
    lon_offset = (distance_km / (KM_PER_DEGREE * cos_lat)) * math.sin(bearing_rad)

    lat = origin.lat + lat_offset
    lon = origin.lon + lon_offset
    # Wrap across the antimeridian; clamp latitude for offsets near the poles.
    lon = (lon + 180.0) % 360.0 - 180.0
    lat = max(-90.0, min(90.0, lat))
    return GeoPoint(lat=lat, lon=lon)
