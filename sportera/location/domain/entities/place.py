"""Place Entity."""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime
from typing import Any, Iterable, Mapping

from sportera.location.domain.constants import PLACE_NAME_MAX_LENGTH
from sportera.location.domain.enums.sport import Sport
from sportera.location.domain.enums.weekday import Weekday
from sportera.location.domain.exceptions.validation import ValidationError
from sportera.location.domain.services.geo import haversine_distance_m
from sportera.location.domain.value_objects.contact_info import ContactInfo
from sportera.location.domain.value_objects.coordinates import Coordinates
from sportera.location.domain.value_objects.opening_hours import (
    DailyHours,
    parse_opening_hours,
)
from sportera.location.domain.value_objects.place_id import PlaceId

# with_changes()에서 수정 가능한 필드
MUTABLE_FIELDS = frozenset(
    {
        "name",
        "coordinates",
        "sports",
        "owner_id",
        "is_active",
        "opening_hours",
        "amenities",
        "contact_info",
        "address",
        "description",
    }
)


def validate_name(name: Any) -> str:
    if not isinstance(name, str) or not name.strip():
        raise ValidationError("name", "is required")
    name = name.strip()
    if len(name) > PLACE_NAME_MAX_LENGTH:
        raise ValidationError("name", f"must be at most {PLACE_NAME_MAX_LENGTH} characters")
    return name


def normalize_sports(values: Iterable[Any] | None) -> tuple[Sport, ...]:
    """종목 목록을 소문자 어휘로 정규화.

    하나라도 어휘에 없으면 전체를 거부하고, 잘못된 항목을 모두 메시지에 담습니다.
    """
    if values is None or isinstance(values, str):
        raise ValidationError("sports", "must be a non-empty list of sports")
    raw = list(values)
    if not raw:
        raise ValidationError("sports", "at least one sport is required")

    sports: list[Sport] = []
    invalid: list[str] = []
    for value in raw:
        sport = value if isinstance(value, Sport) else Sport.parse(str(value))
        if sport is None:
            invalid.append(str(value))
        elif sport not in sports:
            sports.append(sport)
    if invalid:
        raise ValidationError("sports", f"invalid sports: {', '.join(invalid)}")
    return tuple(sports)


def _normalize_amenities(values: Iterable[str] | None) -> tuple[str, ...]:
    if not values:
        return ()
    return tuple(str(value) for value in values)


@dataclass(frozen=True, slots=True, eq=False)
class Place:
    """스포츠 시설 엔티티.

    불변 객체이며, 변경은 with_changes()로 새 인스턴스를 만드는 방식으로만 일어납니다.
    동등성은 id_ 기준입니다.
    """

    id_: PlaceId
    name: str
    coordinates: Coordinates
    sports: tuple[Sport, ...]
    created_at: datetime
    updated_at: datetime
    owner_id: str | None = None
    is_active: bool = True
    opening_hours: Mapping[Weekday, DailyHours] | None = None
    amenities: tuple[str, ...] = ()
    contact_info: ContactInfo | None = None
    address: str | None = None
    description: str | None = None

    @classmethod
    def create(
        cls,
        *,
        name: str,
        latitude: float,
        longitude: float,
        sports: Iterable[str],
        now: datetime,
        id_: PlaceId | None = None,
        owner_id: str | None = None,
        is_active: bool = True,
        opening_hours: Mapping[str, Any] | None = None,
        amenities: Iterable[str] | None = None,
        contact_info: ContactInfo | None = None,
        address: str | None = None,
        description: str | None = None,
    ) -> "Place":
        """검증된 팩토리. 하나라도 불변식을 어기면 ValidationError를 발생시키고 아무것도 만들지 않습니다."""
        return cls(
            id_=id_ or PlaceId.generate(),
            name=validate_name(name),
            coordinates=Coordinates(latitude=latitude, longitude=longitude),
            sports=normalize_sports(sports),
            created_at=now,
            updated_at=now,
            owner_id=owner_id,
            is_active=bool(is_active),
            opening_hours=parse_opening_hours(opening_hours),
            amenities=_normalize_amenities(amenities),
            contact_info=contact_info,
            address=address,
            description=description,
        )

    def with_changes(self, *, now: datetime, **changes: Any) -> "Place":
        """전달된 필드만 재검증해서 병합한 새 Place 반환. updated_at은 항상 갱신.

        coordinates는 Coordinates 인스턴스로 전달해야 합니다.
        """
        unknown = set(changes) - MUTABLE_FIELDS
        if unknown:
            raise ValidationError(sorted(unknown)[0], "is not an updatable field")

        validated: dict[str, Any] = {}
        if "name" in changes:
            validated["name"] = validate_name(changes["name"])
        if "coordinates" in changes:
            coordinates = changes["coordinates"]
            if not isinstance(coordinates, Coordinates):
                raise ValidationError("coordinates", "is required")
            validated["coordinates"] = coordinates
        if "sports" in changes:
            validated["sports"] = normalize_sports(changes["sports"])
        if "opening_hours" in changes:
            validated["opening_hours"] = parse_opening_hours(changes["opening_hours"])
        if "amenities" in changes:
            validated["amenities"] = _normalize_amenities(changes["amenities"])
        if "is_active" in changes:
            validated["is_active"] = bool(changes["is_active"])
        for key in ("owner_id", "contact_info", "address", "description"):
            if key in changes:
                validated[key] = changes[key]

        return replace(self, updated_at=now, **validated)

    def distance_from(self, point: Coordinates) -> float:
        """주어진 좌표까지의 거리(meters)."""
        return haversine_distance_m(self.coordinates, point)

    def offers(self, sport: Sport) -> bool:
        return sport in self.sports

    def is_open_at(self, moment: datetime) -> bool:
        """주어진 시각에 운영 중인지.

        운영 시간 정보가 없으면 항상 열려 있고, 해당 요일 정보가 없으면 닫혀 있습니다.
        """
        if self.opening_hours is None:
            return True
        hours = self.opening_hours.get(Weekday.from_index(moment.weekday()))
        if hours is None:
            return False
        return hours.contains(moment.time())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Place):
            return NotImplemented
        return self.id_ == other.id_

    def __hash__(self) -> int:
        return hash(self.id_)

    def __repr__(self) -> str:
        return f"Place(id_={self.id_!s}, name={self.name!r})"
