"""AccountIdGenerator Port."""

from typing import Protocol

from sportera.auth.domain.value_objects.account_id import AccountId


class AccountIdGenerator(Protocol):
    """계정 ID 생성 인터페이스.

    구현체:
        - UuidAccountIdGenerator (infrastructure/adapters/)
    """

    def __call__(self) -> AccountId:
        """새 AccountId 생성."""
        ...
