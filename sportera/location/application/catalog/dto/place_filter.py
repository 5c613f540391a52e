"""PlaceFilter DTO."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from sportera.location.domain.value_objects import Coordinates


@dataclass(frozen=True)
class PlaceFilter:
    """카탈로그 필터 조건. 전달된 조건은 모두 AND로 적용.

    지리 조건은 center와 radius_m이 모두 있을 때만 적용되고, 하나만 있으면 무시됩니다.
    sports는 하나라도 제공하면 매칭(any-of)입니다.
    """

    sports: Sequence[str] | None = None
    owner_id: str | None = None
    is_active: bool | None = None
    center: Coordinates | None = None
    radius_m: float | None = None

    @property
    def has_geo(self) -> bool:
        return self.center is not None and self.radius_m is not None
