"""PlaceId Value Object."""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from uuid import UUID

from sportera.location.domain.exceptions.place import PlaceNotFoundError


@dataclass(frozen=True, slots=True)
class PlaceId:
    """장소 식별자 Value Object."""

    value: UUID

    def __str__(self) -> str:
        return str(self.value)

    @classmethod
    def from_string(cls, value: str) -> "PlaceId":
        """문자열에서 PlaceId 생성.

        형식이 잘못된 id는 존재할 수 없는 id이므로 NotFound로 취급합니다.
        """
        try:
            return cls(value=UUID(value))
        except (ValueError, AttributeError, TypeError) as e:
            raise PlaceNotFoundError(str(value)) from e

    @classmethod
    def generate(cls) -> "PlaceId":
        """새 PlaceId 생성 (UUID v4)."""
        return cls(value=uuid.uuid4())
