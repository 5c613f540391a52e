"""Account Kind Enum."""

from enum import Enum


class AccountKind(str, Enum):
    """계정 종류."""

    STANDARD = "standard"
    ORGANIZATION = "organization"

    @classmethod
    def from_string(cls, value: str) -> "AccountKind":
        """문자열에서 AccountKind 생성.

        Raises:
            ValueError: 지원하지 않는 계정 종류
        """
        try:
            return cls(value.strip().lower())
        except ValueError as e:
            supported = ", ".join(k.value for k in cls)
            raise ValueError(f"Unsupported account kind: {value}. Supported: {supported}") from e
