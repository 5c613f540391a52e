"""GetNearbyPlacesQuery 단위 테스트."""

from datetime import datetime, timezone
from unittest.mock import AsyncMock

import pytest

from sportera.location.application.nearby import GetNearbyPlacesQuery, SearchRequest
from sportera.location.domain.entities import Place
from sportera.location.domain.exceptions import ValidationError
from sportera.location.infrastructure.persistence_memory import (
    InMemoryPlaceStore,
    build_demo_places,
)

NOW = datetime(2024, 6, 3, 10, 0, tzinfo=timezone.utc)
JEAN_BOUIN = (48.8415, 2.2530)


def make_place(name: str, latitude: float, longitude: float, **kwargs) -> Place:
    return Place.create(
        name=name,
        latitude=latitude,
        longitude=longitude,
        sports=["football"],
        now=NOW,
        **kwargs,
    )


class TestGetNearbyPlacesQuery:
    """주변 장소 검색 테스트."""

    @pytest.fixture
    def demo_store(self) -> InMemoryPlaceStore:
        return InMemoryPlaceStore(build_demo_places(NOW))

    @pytest.fixture
    def query(self, demo_store: InMemoryPlaceStore) -> GetNearbyPlacesQuery:
        return GetNearbyPlacesQuery(demo_store)

    @pytest.mark.asyncio
    async def test_exact_location_found_with_one_meter_radius(
        self, query: GetNearbyPlacesQuery
    ) -> None:
        """Stade Jean Bouin 좌표에서 반경 1m 검색."""
        # Arrange
        latitude, longitude = JEAN_BOUIN
        request = SearchRequest(latitude=latitude, longitude=longitude, radius_m=1)

        # Act
        results = await query.execute(request)

        # Assert
        assert [r.place.name for r in results] == ["Stade Jean Bouin"]
        assert results[0].distance_m == 0.0

    @pytest.mark.asyncio
    async def test_results_sorted_by_distance(self, query: GetNearbyPlacesQuery) -> None:
        latitude, longitude = JEAN_BOUIN
        results = await query.execute(
            SearchRequest(latitude=latitude, longitude=longitude, radius_m=50_000)
        )

        distances = [r.distance_m for r in results]
        assert len(results) == 8
        assert distances == sorted(distances)
        assert all(d <= 50_000 for d in distances)

    @pytest.mark.asyncio
    async def test_max_radius_accepted(self, query: GetNearbyPlacesQuery) -> None:
        results = await query.execute(SearchRequest(latitude=48.85, longitude=2.35, radius_m=50_000))
        assert results

    @pytest.mark.parametrize("radius", [50_001, 0, -5, float("nan")])
    def test_invalid_radius_rejected(self, query: GetNearbyPlacesQuery, radius: float) -> None:
        with pytest.raises(ValidationError) as exc_info:
            query.validate(SearchRequest(latitude=48.85, longitude=2.35, radius_m=radius))
        assert exc_info.value.field == "radius"

    @pytest.mark.asyncio
    async def test_invalid_coordinates_do_not_touch_store(self) -> None:
        """검증 실패 시 저장소를 조회하지 않음."""
        # Arrange
        reader = AsyncMock()
        query = GetNearbyPlacesQuery(reader)

        # Act & Assert
        with pytest.raises(ValidationError) as exc_info:
            await query.execute(SearchRequest(latitude=91.0, longitude=2.35, radius_m=100))
        assert exc_info.value.field == "latitude"
        reader.list_all.assert_not_called()

    @pytest.mark.asyncio
    async def test_inactive_places_excluded(self) -> None:
        # Arrange
        active = make_place("Actif", 48.8415, 2.2530)
        inactive = make_place("Fermé", 48.8415, 2.2530, is_active=False)
        query = GetNearbyPlacesQuery(InMemoryPlaceStore([inactive, active]))

        # Act
        results = await query.execute(SearchRequest(latitude=48.8415, longitude=2.2530, radius_m=10))

        # Assert
        assert [r.place for r in results] == [active]

    @pytest.mark.asyncio
    async def test_equal_distances_keep_insertion_order(self) -> None:
        first = make_place("Premier", 48.8415, 2.2530)
        second = make_place("Second", 48.8415, 2.2530)
        query = GetNearbyPlacesQuery(InMemoryPlaceStore([first, second]))

        results = await query.execute(SearchRequest(latitude=48.8415, longitude=2.2530, radius_m=10))

        assert [r.place.name for r in results] == ["Premier", "Second"]

    @pytest.mark.asyncio
    async def test_empty_catalog_returns_empty_list(self) -> None:
        query = GetNearbyPlacesQuery(InMemoryPlaceStore())
        results = await query.execute(SearchRequest(latitude=0.0, longitude=0.0, radius_m=1000))
        assert results == []

    def test_configured_max_radius(self) -> None:
        query = GetNearbyPlacesQuery(InMemoryPlaceStore(), max_radius_m=1000)
        with pytest.raises(ValidationError):
            query.validate(SearchRequest(latitude=0.0, longitude=0.0, radius_m=1001))
