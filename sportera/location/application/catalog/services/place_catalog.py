"""Place Catalog Service.

장소 생성/조회/수정/삭제와 구조적 질의(소유자, 종목, 복합 필터)를 담당합니다.
검증과 질의 조건은 여기서 처리하고, 저장은 PlaceStore 포트에 위임합니다.
"""

from __future__ import annotations

import logging

from sportera._shared.clock import Clock, utc_now
from sportera.location.application.catalog.dto import PlaceChanges, PlaceFilter, PlaceSpec
from sportera.location.application.catalog.ports import PlaceStore
from sportera.location.domain.entities import Place
from sportera.location.domain.enums import Sport
from sportera.location.domain.exceptions import PlaceNotFoundError, ValidationError
from sportera.location.domain.value_objects import Coordinates, PlaceId

logger = logging.getLogger(__name__)


class PlaceCatalogService:
    """장소 카탈로그.

    모든 목록 결과는 저장소의 삽입 순서를 유지합니다.
    """

    def __init__(self, store: PlaceStore, clock: Clock = utc_now) -> None:
        self._store = store
        self._clock = clock

    async def create(self, spec: PlaceSpec) -> Place:
        """장소 생성.

        Raises:
            ValidationError: 이름/좌표/종목 등 불변식 위반 (저장되지 않음)
        """
        place = Place.create(
            name=spec.name,
            latitude=spec.latitude,
            longitude=spec.longitude,
            sports=spec.sports,
            now=self._clock(),
            owner_id=spec.owner_id,
            is_active=spec.is_active,
            opening_hours=spec.opening_hours,
            amenities=spec.amenities,
            contact_info=spec.contact_info,
            address=spec.address,
            description=spec.description,
        )
        saved = await self._store.add(place)
        logger.info(
            "Place created",
            extra={"place_id": str(saved.id_), "owner_id": saved.owner_id},
        )
        return saved

    async def get_by_id(self, place_id: PlaceId) -> Place:
        """id로 조회.

        Raises:
            PlaceNotFoundError: 존재하지 않는 장소
        """
        place = await self._store.get(place_id)
        if place is None:
            raise PlaceNotFoundError(str(place_id))
        return place

    async def list_all(self) -> list[Place]:
        return await self._store.list_all()

    async def list_by_owner(self, owner_id: str) -> list[Place]:
        places = await self._store.list_all()
        return [place for place in places if place.owner_id == owner_id]

    async def list_by_sport(self, sport: str) -> list[Place]:
        """종목별 활성 장소. 어휘에 없는 종목은 빈 목록."""
        wanted = Sport.parse(sport)
        if wanted is None:
            return []
        places = await self._store.list_all()
        return [place for place in places if place.is_active and place.offers(wanted)]

    async def update(self, place_id: PlaceId, changes: PlaceChanges) -> Place:
        """부분 수정. 전달된 필드만 재검증하고 updated_at을 갱신합니다.

        Raises:
            PlaceNotFoundError: 존재하지 않는 장소
            ValidationError: 수정 결과가 불변식을 깨는 경우 (예: 종목 전부 제거)
        """
        current = await self.get_by_id(place_id)

        supplied = changes.supplied()
        latitude = supplied.pop("latitude", None)
        longitude = supplied.pop("longitude", None)
        if latitude is not None or longitude is not None:
            supplied["coordinates"] = Coordinates(
                latitude=current.coordinates.latitude if latitude is None else latitude,
                longitude=current.coordinates.longitude if longitude is None else longitude,
            )
        if "name" in supplied and supplied["name"] is None:
            raise ValidationError("name", "is required")

        updated = current.with_changes(now=self._clock(), **supplied)
        stored = await self._store.replace(updated)
        if stored is None:
            # 조회와 교체 사이에 삭제됨
            raise PlaceNotFoundError(str(place_id))
        logger.info(
            "Place updated",
            extra={"place_id": str(place_id), "fields": sorted(supplied)},
        )
        return stored

    async def delete(self, place_id: PlaceId) -> bool:
        removed = await self._store.remove(place_id)
        if removed:
            logger.info("Place deleted", extra={"place_id": str(place_id)})
        return removed

    async def filter(self, criteria: PlaceFilter) -> list[Place]:
        """전달된 조건을 AND로 적용한 장소 목록."""
        wanted_sports: set[Sport] | None = None
        if criteria.sports:
            wanted_sports = {
                sport for sport in (Sport.parse(str(value)) for value in criteria.sports) if sport
            }

        places = await self._store.list_all()
        results: list[Place] = []
        for place in places:
            if wanted_sports is not None and not wanted_sports.intersection(place.sports):
                continue
            if criteria.owner_id is not None and place.owner_id != criteria.owner_id:
                continue
            if criteria.is_active is not None and place.is_active != criteria.is_active:
                continue
            if criteria.has_geo and place.distance_from(criteria.center) > criteria.radius_m:
                continue
            results.append(place)
        return results
