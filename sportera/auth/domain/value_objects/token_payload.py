"""TokenPayload Value Object."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping
from uuid import UUID

from sportera.auth.domain.enums.account_kind import AccountKind
from sportera.auth.domain.enums.token_type import TokenType
from sportera.auth.domain.exceptions.auth import InvalidTokenError
from sportera.auth.domain.value_objects.account_id import AccountId
from sportera.auth.domain.value_objects.base import ValueObject


@dataclass(frozen=True, slots=True)
class TokenPayload(ValueObject):
    """디코딩된 JWT 토큰 페이로드."""

    account_id: AccountId
    email: str
    kind: AccountKind
    jti: str
    token_type: TokenType
    exp: int  # Unix timestamp
    iat: int  # Unix timestamp

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "TokenPayload":
        """딕셔너리에서 TokenPayload 생성.

        Raises:
            InvalidTokenError: 필수 클레임 누락 또는 형식 오류
        """
        try:
            return cls(
                account_id=AccountId(value=UUID(str(data["sub"]))),
                email=str(data["email"]),
                kind=AccountKind(data["kind"]),
                jti=str(data["jti"]),
                token_type=TokenType(data["type"]),
                exp=int(data["exp"]),
                iat=int(data["iat"]),
            )
        except (KeyError, TypeError, ValueError) as e:
            raise InvalidTokenError("Malformed token claims", reason="malformed") from e
