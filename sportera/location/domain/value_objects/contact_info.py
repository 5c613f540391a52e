"""ContactInfo Value Object."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Mapping


@dataclass(frozen=True, slots=True)
class ContactInfo:
    """장소 연락처. 검증 규칙 없는 설명 메타데이터."""

    phone: str | None = None
    email: str | None = None
    website: str | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> "ContactInfo | None":
        if not data:
            return None
        return cls(
            phone=data.get("phone"),
            email=data.get("email"),
            website=data.get("website"),
        )

    def to_dict(self) -> dict[str, str | None]:
        return asdict(self)
