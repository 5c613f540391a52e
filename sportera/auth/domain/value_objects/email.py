"""Email Value Object."""

from __future__ import annotations

import re
from dataclasses import dataclass

from sportera.auth.domain.exceptions.validation import InvalidEmailError
from sportera.auth.domain.value_objects.base import ValueObject

EMAIL_PATTERN = re.compile(r"^\w+([.-]?\w+)*@\w+([.-]?\w+)*(\.\w{2,3})+$")


@dataclass(frozen=True, slots=True)
class Email(ValueObject):
    """정규화된(소문자, 공백 제거) 이메일 주소.

    계정 유일성은 이 정규화된 값 기준입니다.
    """

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not self.value:
            raise InvalidEmailError("Email is required")
        if self.value != self.value.strip().lower():
            raise InvalidEmailError("Email must be normalized")
        if not EMAIL_PATTERN.match(self.value):
            raise InvalidEmailError()

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, raw: str) -> "Email":
        """입력 문자열을 정규화한 뒤 검증."""
        if not isinstance(raw, str):
            raise InvalidEmailError("Email is required")
        return cls(value=raw.strip().lower())
