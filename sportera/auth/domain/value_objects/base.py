"""Value Object Base Class.

Value Object의 특징:
- 불변(Immutable)
- 동등성은 값으로 비교 (ID가 아님)
- 자기 검증(Self-validation)
"""

from __future__ import annotations

from abc import ABC


class ValueObject(ABC):
    """Value Object 베이스 클래스.

    dataclass(frozen=True, slots=True)와 함께 사용합니다.
    """

    __slots__ = ()

    def __repr__(self) -> str:
        """민감 정보 보호를 위해 값은 출력하지 않음."""
        return f"{self.__class__.__name__}(...)"
