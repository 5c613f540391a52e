"""Places Controller.

주변 검색, 필터 검색, 단건 조회와 단체 계정의 장소 관리 API입니다.
"""

from __future__ import annotations

import logging
import time
from typing import Annotated, Optional

from fastapi import APIRouter, Query, status

from sportera.auth.application.common.exceptions import PermissionDeniedError
from sportera.location.application.catalog import PlaceChanges, PlaceFilter, PlaceSpec
from sportera.location.application.nearby import SearchRequest
from sportera.location.domain.value_objects import ContactInfo, Coordinates, PlaceId
from sportera.location.presentation.http.schemas import (
    CenterSchema,
    NearbyPlacesResponse,
    PlaceCreateRequest,
    PlaceDeletedResponse,
    PlaceEntry,
    PlaceListResponse,
    PlaceResponse,
    PlaceUpdateRequest,
)
from sportera.setup.dependencies import (
    CurrentOrganization,
    NearbyQueryDep,
    PlaceCatalogDep,
    SettingsDep,
)
from sportera.setup.metrics import observe_nearby_search

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/places", tags=["places"])


# =============================================================================
# 조회
# =============================================================================


@router.get("", response_model=NearbyPlacesResponse, summary="주변 장소 검색")
async def get_nearby_places(
    query: NearbyQueryDep,
    settings: SettingsDep,
    lat: Annotated[float, Query(description="검색 중심 위도")],
    lng: Annotated[float, Query(description="검색 중심 경도")],
    radius: Annotated[Optional[float], Query(description="검색 반경 (meters)")] = None,
) -> NearbyPlacesResponse:
    """반경 이내 활성 장소를 가까운 순으로 반환합니다."""
    radius_m = radius if radius is not None else settings.default_search_radius_m
    request = SearchRequest(latitude=lat, longitude=lng, radius_m=radius_m)

    started = time.perf_counter()
    results = await query.execute(request)
    observe_nearby_search(time.perf_counter() - started, len(results))

    return NearbyPlacesResponse(
        data=[PlaceEntry.from_entity(r.place, distance_m=r.distance_m) for r in results],
        count=len(results),
        radius=radius_m,
        center=CenterSchema(latitude=lat, longitude=lng),
    )


@router.get("/search", response_model=PlaceListResponse, summary="장소 필터 검색")
async def search_places(
    catalog: PlaceCatalogDep,
    sport: Annotated[Optional[list[str]], Query(description="종목 (여러 개면 하나라도 일치)")] = None,
    owner_id: Optional[str] = None,
    active: Optional[bool] = None,
    lat: Optional[float] = None,
    lng: Optional[float] = None,
    radius: Annotated[Optional[float], Query(gt=0)] = None,
) -> PlaceListResponse:
    """조건을 AND로 적용합니다. 지리 조건은 lat, lng, radius가 모두 있을 때만 적용됩니다."""
    center = None
    if lat is not None and lng is not None:
        center = Coordinates(latitude=lat, longitude=lng)

    places = await catalog.filter(
        PlaceFilter(
            sports=sport,
            owner_id=owner_id,
            is_active=active,
            center=center,
            radius_m=radius,
        )
    )
    return PlaceListResponse(
        data=[PlaceEntry.from_entity(place) for place in places],
        count=len(places),
    )


@router.get("/{place_id}", response_model=PlaceResponse, summary="장소 조회")
async def get_place(place_id: str, catalog: PlaceCatalogDep) -> PlaceResponse:
    place = await catalog.get_by_id(PlaceId.from_string(place_id))
    return PlaceResponse(data=PlaceEntry.from_entity(place))


# =============================================================================
# 관리 (단체 계정 전용)
# =============================================================================


@router.post(
    "",
    response_model=PlaceResponse,
    status_code=status.HTTP_201_CREATED,
    summary="장소 등록",
)
async def create_place(
    payload: PlaceCreateRequest,
    catalog: PlaceCatalogDep,
    account: CurrentOrganization,
) -> PlaceResponse:
    place = await catalog.create(
        PlaceSpec(
            name=payload.name,
            latitude=payload.latitude,
            longitude=payload.longitude,
            sports=payload.sports,
            owner_id=account.account_id,
            is_active=payload.is_active,
            opening_hours=payload.opening_hours,
            amenities=payload.amenities,
            contact_info=(
                ContactInfo.from_dict(payload.contact_info.model_dump())
                if payload.contact_info
                else None
            ),
            address=payload.address,
            description=payload.description,
        )
    )
    return PlaceResponse(data=PlaceEntry.from_entity(place))


@router.patch("/{place_id}", response_model=PlaceResponse, summary="장소 수정")
async def update_place(
    place_id: str,
    payload: PlaceUpdateRequest,
    catalog: PlaceCatalogDep,
    account: CurrentOrganization,
) -> PlaceResponse:
    target = PlaceId.from_string(place_id)
    await _ensure_owner(catalog, target, account.account_id)

    changes = payload.model_dump(exclude_unset=True)
    if changes.get("is_active", True) is None:
        del changes["is_active"]
    if "contact_info" in changes:
        changes["contact_info"] = ContactInfo.from_dict(changes["contact_info"])

    place = await catalog.update(target, PlaceChanges(**changes))
    return PlaceResponse(data=PlaceEntry.from_entity(place))


@router.delete("/{place_id}", response_model=PlaceDeletedResponse, summary="장소 삭제")
async def delete_place(
    place_id: str,
    catalog: PlaceCatalogDep,
    account: CurrentOrganization,
) -> PlaceDeletedResponse:
    target = PlaceId.from_string(place_id)
    await _ensure_owner(catalog, target, account.account_id)
    await catalog.delete(target)
    return PlaceDeletedResponse()


async def _ensure_owner(catalog, place_id: PlaceId, account_id: str) -> None:
    place = await catalog.get_by_id(place_id)
    if place.owner_id != account_id:
        logger.info(
            "Place modification denied",
            extra={"place_id": str(place_id), "account_id": account_id},
        )
        raise PermissionDeniedError("Only the owner can modify this place")
