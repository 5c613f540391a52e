"""ORM ↔ Entity Mappers."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

from sportera.auth.domain.entities.account import Account
from sportera.auth.domain.enums import AccountKind
from sportera.auth.domain.value_objects import AccountId, Email, PasswordHash
from sportera.auth.infrastructure.persistence_postgres.models import AccountModel


def _as_utc(value: datetime) -> datetime:
    return value if value.tzinfo else value.replace(tzinfo=timezone.utc)


def account_to_row(account: Account) -> dict[str, Any]:
    return {
        "account_id": account.id_.value,
        "name": account.name,
        "email": account.email.value,
        "password_hash": account.password_hash.value,
        "kind": account.kind.value,
        "organization_name": account.organization_name,
        "organization_description": account.organization_description,
        "points": account.points,
        "created_at": account.created_at,
        "updated_at": account.updated_at,
    }


def account_model_to_entity(model: AccountModel) -> Account:
    return Account(
        id_=AccountId(value=model.account_id),
        name=model.name,
        email=Email(value=model.email),
        password_hash=PasswordHash(value=model.password_hash),
        kind=AccountKind(model.kind),
        organization_name=model.organization_name,
        organization_description=model.organization_description,
        points=model.points,
        created_at=_as_utc(model.created_at),
        updated_at=_as_utc(model.updated_at),
    )
