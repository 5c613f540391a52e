"""GetNearbyPlaces Query.

"내 주변" 장소 검색 Use Case입니다.

전체 장소를 선형 스캔(O(n))하며 공간 인덱스와 페이지네이션은 없습니다.
카탈로그가 커지면 저장소 측 지리 인덱스가 필요합니다.
"""

from __future__ import annotations

import logging
import math

from sportera.location.application.nearby.dto import NearbyPlaceDTO, SearchRequest
from sportera.location.application.nearby.ports import PlaceReader
from sportera.location.domain.constants import MAX_SEARCH_RADIUS_METERS
from sportera.location.domain.exceptions import ValidationError
from sportera.location.domain.value_objects import Coordinates

logger = logging.getLogger(__name__)


class GetNearbyPlacesQuery:
    """주변 장소 검색 Query.

    1. 좌표/반경 검증 (실패 시 저장소를 조회하지 않음)
    2. 활성 장소만 거리 계산
    3. 반경 이내(경계 포함) 필터
    4. 거리 오름차순 안정 정렬 (동일 거리는 삽입 순서 유지)
    """

    def __init__(
        self,
        reader: PlaceReader,
        max_radius_m: float = MAX_SEARCH_RADIUS_METERS,
    ) -> None:
        self._reader = reader
        self._max_radius_m = max_radius_m

    def validate(self, request: SearchRequest) -> Coordinates:
        """요청 검증 후 검색 중심 좌표 반환.

        Raises:
            ValidationError: 위도/경도/반경 범위 위반
        """
        center = Coordinates(latitude=request.latitude, longitude=request.longitude)
        radius = request.radius_m
        if (
            not isinstance(radius, (int, float))
            or math.isnan(radius)
            or not 0 < radius <= self._max_radius_m
        ):
            raise ValidationError(
                "radius",
                f"must be greater than 0 and at most {self._max_radius_m:g} meters",
            )
        return center

    async def execute(self, request: SearchRequest) -> list[NearbyPlaceDTO]:
        """주변 장소 검색.

        Args:
            request: 검색 요청 DTO

        Returns:
            거리 오름차순 결과 목록 (빈 카탈로그면 빈 목록)

        Raises:
            ValidationError: 요청 값이 범위를 벗어난 경우
        """
        center = self.validate(request)

        places = await self._reader.list_all()
        matches = []
        for place in places:
            if not place.is_active:
                continue
            distance = place.distance_from(center)
            if distance <= request.radius_m:
                matches.append(NearbyPlaceDTO(place=place, distance_m=distance))

        # sorted()는 안정 정렬이므로 동일 거리는 삽입 순서를 유지
        results = sorted(matches, key=lambda entry: entry.distance_m)

        logger.debug(
            "Nearby search completed",
            extra={
                "scanned": len(places),
                "matched": len(results),
                "radius_m": request.radius_m,
            },
        )
        return results
