"""Auth Application DTOs."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from sportera.auth.domain.entities.account import AccountView
from sportera.auth.domain.enums.account_kind import AccountKind


@dataclass(frozen=True)
class RegisterRequest:
    name: str
    email: str
    password: str
    kind: AccountKind = AccountKind.STANDARD
    organization_name: str | None = None
    organization_description: str | None = None


@dataclass(frozen=True)
class LoginRequest:
    email: str
    password: str


@dataclass(frozen=True)
class TokenClaims:
    """발급할 토큰의 주체 정보."""

    account_id: str
    email: str
    kind: AccountKind


@dataclass(frozen=True)
class IssuedToken:
    token: str
    jti: str
    expires_at: datetime


@dataclass(frozen=True)
class LoginResult:
    account: AccountView
    token: str
    expires_at: datetime


@dataclass(frozen=True)
class ValidatedAccount:
    """토큰 검증 결과. 계정이 아직 존재함이 확인된 상태."""

    account_id: str
    email: str
    kind: AccountKind
    jti: str

    @property
    def is_organization(self) -> bool:
        return self.kind is AccountKind.ORGANIZATION


__all__ = [
    "AccountView",
    "RegisterRequest",
    "LoginRequest",
    "TokenClaims",
    "IssuedToken",
    "LoginResult",
    "ValidatedAccount",
]
