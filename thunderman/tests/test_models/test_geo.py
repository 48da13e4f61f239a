"""Tests for Point and Haversine distance."""

import math

import pytest

from thunderman.models.geo import EARTH_RADIUS_KM, Point, earth_distance_from

PARIS = Point(48.85341, -2.34880)
LONDON = Point(51.50853, -0.12574)


class TestEarthDistance:
    def test_paris_to_london(self):
        assert earth_distance_from(PARIS, LONDON) == pytest.approx(334.96, abs=0.1)

    def test_method_matches_function(self):
        assert PARIS.earth_distance_from(LONDON) == earth_distance_from(PARIS, LONDON)

    def test_symmetric(self):
        pairs = [
            (PARIS, LONDON),
            (Point(35.05, -106.65), Point(40.7128, -74.0060)),
            (Point(-33.8688, 151.2093), Point(64.1466, -21.9426)),
        ]
        for a, b in pairs:
            assert earth_distance_from(a, b) == pytest.approx(
                earth_distance_from(b, a), rel=1e-9
            )

    def test_same_point_is_zero(self):
        assert earth_distance_from(PARIS, PARIS) == pytest.approx(0.0, abs=1e-9)

    def test_quarter_meridian(self):
        d = earth_distance_from(Point(0.0, 0.0), Point(90.0, 0.0))
        assert d == pytest.approx(EARTH_RADIUS_KM * math.pi / 2, rel=1e-9)

    def test_antipodal_is_half_circumference(self):
        d = earth_distance_from(Point(0.0, 0.0), Point(0.0, 180.0))
        assert not math.isnan(d)
        assert d == pytest.approx(EARTH_RADIUS_KM * math.pi, rel=1e-9)

    def test_near_antipodal_not_nan(self):
        d = earth_distance_from(Point(45.0, 30.0), Point(-45.0, -150.0))
        assert not math.isnan(d)
        assert d == pytest.approx(EARTH_RADIUS_KM * math.pi, rel=1e-6)


class TestPoint:
    def test_frozen(self):
        with pytest.raises(AttributeError):
            PARIS.lat = 0.0  # type: ignore[misc]

    def test_equality(self):
        assert Point(1.5, 2.5) == Point(1.5, 2.5)
