"""PlaceSpec DTO."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Sequence

from sportera.location.domain.value_objects import ContactInfo


@dataclass(frozen=True)
class PlaceSpec:
    """장소 생성 요청 (검증 전 원시 값)."""

    name: str
    latitude: float
    longitude: float
    sports: Sequence[str]
    owner_id: str | None = None
    is_active: bool = True
    opening_hours: Mapping[str, Any] | None = None
    amenities: Sequence[str] = field(default_factory=tuple)
    contact_info: ContactInfo | None = None
    address: str | None = None
    description: str | None = None
