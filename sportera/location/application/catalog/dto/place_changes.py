"""PlaceChanges DTO."""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any


class _Unset:
    """전달되지 않은 필드 표식 (None과 구분)."""

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "UNSET"


UNSET: Any = _Unset()


@dataclass(frozen=True)
class PlaceChanges:
    """장소 부분 수정 요청.

    UNSET인 필드는 건드리지 않습니다. None은 선택 필드를 비우는 값입니다.
    latitude/longitude는 둘 중 하나만 와도 기존 값과 합쳐 재검증합니다.
    """

    name: Any = UNSET
    latitude: Any = UNSET
    longitude: Any = UNSET
    sports: Any = UNSET
    owner_id: Any = UNSET
    is_active: Any = UNSET
    opening_hours: Any = UNSET
    amenities: Any = UNSET
    contact_info: Any = UNSET
    address: Any = UNSET
    description: Any = UNSET

    def supplied(self) -> dict[str, Any]:
        """전달된 필드만 dict로 반환."""
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if getattr(self, f.name) is not UNSET
        }
