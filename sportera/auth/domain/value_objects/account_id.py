"""AccountId Value Object."""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from uuid import UUID

from sportera.auth.domain.exceptions.account import AccountNotFoundError
from sportera.auth.domain.value_objects.base import ValueObject


@dataclass(frozen=True, slots=True)
class AccountId(ValueObject):
    """계정 식별자 Value Object.

    UUID를 래핑하여 타입 안전성을 보장합니다.
    """

    value: UUID

    def __str__(self) -> str:
        return str(self.value)

    def __hash__(self) -> int:
        return hash(self.value)

    def __repr__(self) -> str:
        return f"AccountId({self.value})"

    @classmethod
    def from_string(cls, value: str) -> "AccountId":
        """문자열에서 AccountId 생성.

        Raises:
            AccountNotFoundError: UUID 형식이 아닌 경우 (존재할 수 없는 계정)
        """
        try:
            return cls(value=UUID(str(value)))
        except ValueError as e:
            raise AccountNotFoundError(str(value)) from e

    @classmethod
    def generate(cls) -> "AccountId":
        """새 AccountId 생성 (UUID v4)."""
        return cls(value=uuid.uuid4())
