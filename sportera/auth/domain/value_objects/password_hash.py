"""PasswordHash Value Object."""

from __future__ import annotations

from dataclasses import dataclass

from sportera.auth.domain.value_objects.base import ValueObject


@dataclass(frozen=True, slots=True, repr=False)
class PasswordHash(ValueObject):
    """단방향 비밀번호 해시.

    평문 비밀번호는 도메인에 저장하지 않습니다. repr은 값을 숨깁니다.
    """

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not self.value:
            raise ValueError("PasswordHash cannot be empty")
