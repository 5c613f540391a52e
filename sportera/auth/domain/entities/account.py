"""Account Entity."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from sportera.auth.domain.constants import (
    ACCOUNT_NAME_MAX_LENGTH,
    ORGANIZATION_DESCRIPTION_MAX_LENGTH,
    ORGANIZATION_NAME_MAX_LENGTH,
)
from sportera.auth.domain.entities.base import Entity
from sportera.auth.domain.enums.account_kind import AccountKind
from sportera.auth.domain.exceptions.account import InsufficientPointsError
from sportera.auth.domain.exceptions.validation import ValidationError
from sportera.auth.domain.value_objects.account_id import AccountId
from sportera.auth.domain.value_objects.email import Email
from sportera.auth.domain.value_objects.password_hash import PasswordHash


@dataclass(frozen=True, slots=True)
class AccountView:
    """외부 공개용 계정 정보. 비밀번호 해시는 포함하지 않습니다."""

    id: str
    name: str
    email: str
    kind: AccountKind
    points: int
    created_at: datetime
    updated_at: datetime
    organization_name: str | None = None
    organization_description: str | None = None


def validate_account_name(name: object) -> str:
    if not isinstance(name, str) or not name.strip():
        raise ValidationError("name", "is required")
    name = name.strip()
    if len(name) > ACCOUNT_NAME_MAX_LENGTH:
        raise ValidationError("name", f"must be at most {ACCOUNT_NAME_MAX_LENGTH} characters")
    return name


def validate_organization(
    kind: AccountKind,
    organization_name: str | None,
    organization_description: str | None,
) -> tuple[str | None, str | None]:
    """단체 계정이면 단체명 필수. 일반 계정은 단체 정보를 버립니다."""
    if kind is not AccountKind.ORGANIZATION:
        return None, None

    if not isinstance(organization_name, str) or not organization_name.strip():
        raise ValidationError("organization_name", "is required for organization accounts")
    organization_name = organization_name.strip()
    if len(organization_name) > ORGANIZATION_NAME_MAX_LENGTH:
        raise ValidationError(
            "organization_name",
            f"must be at most {ORGANIZATION_NAME_MAX_LENGTH} characters",
        )

    if organization_description is not None:
        organization_description = organization_description.strip() or None
    if (
        organization_description
        and len(organization_description) > ORGANIZATION_DESCRIPTION_MAX_LENGTH
    ):
        raise ValidationError(
            "organization_description",
            f"must be at most {ORGANIZATION_DESCRIPTION_MAX_LENGTH} characters",
        )
    return organization_name, organization_description


class Account(Entity[AccountId]):
    """계정 엔티티.

    이메일은 정규화된 값으로 유일합니다.
    """

    __slots__ = (
        "name",
        "email",
        "password_hash",
        "kind",
        "organization_name",
        "organization_description",
        "points",
        "created_at",
        "updated_at",
    )

    def __init__(
        self,
        *,
        id_: AccountId,
        name: str,
        email: Email,
        password_hash: PasswordHash,
        kind: AccountKind,
        created_at: datetime,
        updated_at: datetime,
        organization_name: str | None = None,
        organization_description: str | None = None,
        points: int = 0,
    ) -> None:
        super().__init__(id_=id_)
        self.name = name
        self.email = email
        self.password_hash = password_hash
        self.kind = kind
        self.organization_name = organization_name
        self.organization_description = organization_description
        self.points = points
        self.created_at = created_at
        self.updated_at = updated_at

    @classmethod
    def register(
        cls,
        *,
        id_: AccountId,
        name: str,
        email: Email,
        password_hash: PasswordHash,
        kind: AccountKind,
        now: datetime,
        organization_name: str | None = None,
        organization_description: str | None = None,
    ) -> "Account":
        """신규 계정 생성 (포인트 0)."""
        org_name, org_description = validate_organization(
            kind, organization_name, organization_description
        )
        return cls(
            id_=id_,
            name=validate_account_name(name),
            email=email,
            password_hash=password_hash,
            kind=kind,
            organization_name=org_name,
            organization_description=org_description,
            points=0,
            created_at=now,
            updated_at=now,
        )

    @property
    def is_organization(self) -> bool:
        return self.kind is AccountKind.ORGANIZATION

    def add_points(self, amount: int, now: datetime) -> None:
        if amount < 0:
            raise ValidationError("points", "amount must not be negative")
        self.points += amount
        self.updated_at = now

    def subtract_points(self, amount: int, now: datetime) -> None:
        """포인트 차감.

        Raises:
            InsufficientPointsError: 잔액이 음수가 되는 경우 (잔액 변경 없음)
        """
        if amount < 0:
            raise ValidationError("points", "amount must not be negative")
        if amount > self.points:
            raise InsufficientPointsError(balance=self.points, requested=amount)
        self.points -= amount
        self.updated_at = now

    def to_public(self) -> AccountView:
        return AccountView(
            id=str(self.id_),
            name=self.name,
            email=self.email.value,
            kind=self.kind,
            points=self.points,
            created_at=self.created_at,
            updated_at=self.updated_at,
            organization_name=self.organization_name,
            organization_description=self.organization_description,
        )
