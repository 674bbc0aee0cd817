"""Tests for engine/geo.py — haversine distance and bearing offsets."""

from __future__ import annotations

import math

import pytest

from swapnet_whatif.engine.geo import EARTH_RADIUS_KM, distance_km, offset_point
from swapnet_whatif.models.station import GeoPoint

DELHI = GeoPoint(lat=28.6139, lon=77.2090)
MUMBAI = GeoPoint(lat=19.0760, lon=72.8777)


# ═══════════════════════════════════════════════════════════════════════════
# distance_km
# ═══════════════════════════════════════════════════════════════════════════

class TestDistance:

    @pytest.mark.parametrize("point", [
        DELHI,
        MUMBAI,
        GeoPoint(lat=0.0, lon=0.0),
        GeoPoint(lat=-33.8688, lon=151.2093),
        GeoPoint(lat=89.9, lon=-179.9),
    ])
    def test_identical_points_are_zero(self, point: GeoPoint):
        assert distance_km(point, point) == 0.0

    @pytest.mark.parametrize("a, b", [
        (DELHI, MUMBAI),
        (GeoPoint(lat=0.0, lon=179.5), GeoPoint(lat=0.0, lon=-179.5)),
        (GeoPoint(lat=-45.0, lon=10.0), GeoPoint(lat=60.0, lon=-120.0)),
    ])
    def test_symmetric(self, a: GeoPoint, b: GeoPoint):
        assert distance_km(a, b) == pytest.approx(distance_km(b, a), rel=1e-12)

    def test_delhi_mumbai(self):
        """Known great-circle distance ≈ 1150 km."""
        assert distance_km(DELHI, MUMBAI) == pytest.approx(1150, rel=0.01)

    def test_one_degree_of_latitude(self):
        d = distance_km(GeoPoint(lat=0.0, lon=0.0), GeoPoint(lat=1.0, lon=0.0))
        assert d == pytest.approx(EARTH_RADIUS_KM * math.pi / 180, rel=1e-9)

    def test_across_antimeridian_is_short(self):
        d = distance_km(GeoPoint(lat=0.0, lon=179.9), GeoPoint(lat=0.0, lon=-179.9))
        assert d == pytest.approx(22.24, rel=0.01)


# ═══════════════════════════════════════════════════════════════════════════
# offset_point
# ═══════════════════════════════════════════════════════════════════════════

class TestOffset:

    @pytest.mark.parametrize("bearing", [0.0, math.pi / 4, math.pi / 2, math.pi, 4.0, 5.5])
    @pytest.mark.parametrize("dist", [0.5, 0.8, 1.3, 1.8, 2.0])
    def test_measured_distance_matches_request(self, bearing: float, dist: float):
        """Equirectangular offsets stay within ~1% of haversine for short hops."""
        point = offset_point(DELHI, bearing, dist)
        assert point is not None
        assert distance_km(DELHI, point) == pytest.approx(dist, rel=0.01)

    def test_north_moves_latitude_only(self):
        point = offset_point(DELHI, 0.0, 1.11)
        assert point.lat == pytest.approx(DELHI.lat + 0.01)
        assert point.lon == pytest.approx(DELHI.lon)

    def test_east_moves_longitude_only(self):
        point = offset_point(DELHI, math.pi / 2, 1.0)
        assert point.lat == pytest.approx(DELHI.lat)
        expected = 1.0 / (111.0 * math.cos(math.radians(DELHI.lat)))
        assert point.lon - DELHI.lon == pytest.approx(expected)

    def test_zero_distance_returns_origin(self):
        point = offset_point(DELHI, 1.0, 0.0)
        assert point.lat == pytest.approx(DELHI.lat)
        assert point.lon == pytest.approx(DELHI.lon)

    def test_missing_origin_returns_none(self):
        assert offset_point(None, 0.0, 1.0) is None

    def test_pole_returns_none(self):
        assert offset_point(GeoPoint(lat=90.0, lon=0.0), 0.0, 1.0) is None

    def test_wraps_antimeridian(self):
        point = offset_point(GeoPoint(lat=0.0, lon=179.999), math.pi / 2, 1.0)
        assert -180.0 <= point.lon < 180.0
        assert point.lon < 0
