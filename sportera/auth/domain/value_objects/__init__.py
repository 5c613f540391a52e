"""Domain Value Objects."""

from sportera.auth.domain.value_objects.account_id import AccountId
from sportera.auth.domain.value_objects.base import ValueObject
from sportera.auth.domain.value_objects.email import Email
from sportera.auth.domain.value_objects.password_hash import PasswordHash
from sportera.auth.domain.value_objects.token_payload import TokenPayload

__all__ = ["ValueObject", "AccountId", "Email", "PasswordHash", "TokenPayload"]
