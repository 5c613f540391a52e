"""haversine_distance_m 단위 테스트."""

import math

import pytest

from sportera.location.domain.services.geo import haversine_distance_m
from sportera.location.domain.value_objects import Coordinates

PARIS = Coordinates(latitude=48.8566, longitude=2.3522)
LONDON = Coordinates(latitude=51.5074, longitude=-0.1278)


class TestHaversineDistance:
    """대원 거리 계산 테스트."""

    def test_identical_points_are_zero(self) -> None:
        assert haversine_distance_m(PARIS, PARIS) == 0.0

    def test_symmetric(self) -> None:
        assert haversine_distance_m(PARIS, LONDON) == pytest.approx(
            haversine_distance_m(LONDON, PARIS)
        )

    def test_paris_to_london(self) -> None:
        """파리-런던 약 343km."""
        distance = haversine_distance_m(PARIS, LONDON)
        assert distance == pytest.approx(343_500, rel=0.01)

    def test_antipodal_points_are_finite(self) -> None:
        """정반대 지점에서도 NaN 없이 반둘레."""
        distance = haversine_distance_m(
            Coordinates(latitude=0.0, longitude=0.0),
            Coordinates(latitude=0.0, longitude=180.0),
        )
        assert not math.isnan(distance)
        assert distance == pytest.approx(math.pi * 6_371_000.0)

    def test_poles(self) -> None:
        distance = haversine_distance_m(
            Coordinates(latitude=90.0, longitude=0.0),
            Coordinates(latitude=-90.0, longitude=0.0),
        )
        assert distance >= 0
        assert distance == pytest.approx(math.pi * 6_371_000.0)

    def test_custom_radius(self) -> None:
        distance = haversine_distance_m(PARIS, LONDON, radius_m=1.0)
        assert 0 < distance < math.pi
