"""Place HTTP Schemas."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field

from sportera.location.domain.entities import Place


class ContactInfoSchema(BaseModel):
    phone: str | None = None
    email: str | None = None
    website: str | None = None

    model_config = {"from_attributes": True}


class DailyHoursSchema(BaseModel):
    open: str = Field(..., description="HH:MM", examples=["08:00"])
    close: str = Field(..., description="HH:MM", examples=["22:00"])


class CenterSchema(BaseModel):
    latitude: float
    longitude: float


class PlaceEntry(BaseModel):
    """장소 응답 스키마."""

    id: str
    name: str
    latitude: float
    longitude: float
    sports: list[str]
    owner_id: str | None
    is_active: bool
    amenities: list[str]
    opening_hours: dict[str, DailyHoursSchema] | None
    contact_info: ContactInfoSchema | None
    address: str | None
    description: str | None
    created_at: datetime
    updated_at: datetime
    distance_m: float | None = Field(None, description="검색 지점으로부터의 거리 (meters)")

    @classmethod
    def from_entity(cls, place: Place, distance_m: float | None = None) -> "PlaceEntry":
        opening_hours = None
        if place.opening_hours is not None:
            opening_hours = {
                day.value: DailyHoursSchema(**hours.to_dict())
                for day, hours in place.opening_hours.items()
            }
        return cls(
            id=str(place.id_),
            name=place.name,
            latitude=place.coordinates.latitude,
            longitude=place.coordinates.longitude,
            sports=[sport.value for sport in place.sports],
            owner_id=place.owner_id,
            is_active=place.is_active,
            amenities=list(place.amenities),
            opening_hours=opening_hours,
            contact_info=(
                ContactInfoSchema.model_validate(place.contact_info)
                if place.contact_info
                else None
            ),
            address=place.address,
            description=place.description,
            created_at=place.created_at,
            updated_at=place.updated_at,
            distance_m=distance_m,
        )


class NearbyPlacesResponse(BaseModel):
    """주변 검색 응답."""

    success: bool = True
    data: list[PlaceEntry]
    count: int
    radius: float
    center: CenterSchema


class PlaceListResponse(BaseModel):
    success: bool = True
    data: list[PlaceEntry]
    count: int


class PlaceResponse(BaseModel):
    success: bool = True
    data: PlaceEntry


class PlaceDeletedResponse(BaseModel):
    success: bool = True
    message: str = "Place deleted"


class PlaceCreateRequest(BaseModel):
    """장소 등록 요청. 값 검증은 도메인에서 수행합니다."""

    name: str
    latitude: float
    longitude: float
    sports: list[str]
    is_active: bool = True
    opening_hours: dict[str, Any] | None = None
    amenities: list[str] = Field(default_factory=list)
    contact_info: ContactInfoSchema | None = None
    address: str | None = None
    description: str | None = None


class PlaceUpdateRequest(BaseModel):
    """장소 부분 수정 요청. 보낸 필드만 반영합니다."""

    name: str | None = None
    latitude: float | None = None
    longitude: float | None = None
    sports: list[str] | None = None
    is_active: bool | None = None
    opening_hours: dict[str, Any] | None = None
    amenities: list[str] | None = None
    contact_info: ContactInfoSchema | None = None
    address: str | None = None
    description: str | None = None
