"""ORM ↔ Entity Mappers."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

from sportera.location.domain.entities import Place
from sportera.location.domain.enums import Sport
from sportera.location.domain.value_objects import ContactInfo, Coordinates, PlaceId
from sportera.location.domain.value_objects.opening_hours import parse_opening_hours
from sportera.location.infrastructure.persistence_postgres.models import PlaceModel


def _as_utc(value: datetime) -> datetime:
    # SQLite는 tzinfo를 보존하지 않음
    return value if value.tzinfo else value.replace(tzinfo=timezone.utc)


def place_to_row(place: Place) -> dict[str, Any]:
    """Place 엔티티를 컬럼 값 dict로 변환."""
    return {
        "place_id": place.id_.value,
        "name": place.name,
        "latitude": place.coordinates.latitude,
        "longitude": place.coordinates.longitude,
        "sports": [sport.value for sport in place.sports],
        "owner_id": place.owner_id,
        "is_active": place.is_active,
        "opening_hours": (
            {day.value: hours.to_dict() for day, hours in place.opening_hours.items()}
            if place.opening_hours is not None
            else None
        ),
        "amenities": list(place.amenities),
        "contact_info": place.contact_info.to_dict() if place.contact_info else None,
        "address": place.address,
        "description": place.description,
        "created_at": place.created_at,
        "updated_at": place.updated_at,
    }


def place_model_to_entity(model: PlaceModel) -> Place:
    """저장된 행을 Place로 복원."""
    return Place(
        id_=PlaceId(value=model.place_id),
        name=model.name,
        coordinates=Coordinates(latitude=model.latitude, longitude=model.longitude),
        sports=tuple(Sport(value) for value in model.sports),
        created_at=_as_utc(model.created_at),
        updated_at=_as_utc(model.updated_at),
        owner_id=model.owner_id,
        is_active=model.is_active,
        opening_hours=parse_opening_hours(model.opening_hours),
        amenities=tuple(model.amenities or ()),
        contact_info=ContactInfo.from_dict(model.contact_info),
        address=model.address,
        description=model.description,
    )
