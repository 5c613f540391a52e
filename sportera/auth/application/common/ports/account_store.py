"""AccountStore Port.

계정 영속화를 위한 인터페이스입니다.
"""

from typing import Protocol

from sportera.auth.domain.entities.account import Account
from sportera.auth.domain.value_objects.account_id import AccountId
from sportera.auth.domain.value_objects.email import Email


class AccountStore(Protocol):
    """계정 저장소 인터페이스.

    정규화된 이메일 유일성을 보장해야 합니다.

    구현체:
        - InMemoryAccountStore (infrastructure/persistence_memory/)
        - SqlaAccountStore (infrastructure/persistence_postgres/)
    """

    async def save(self, account: Account) -> Account:
        """새 계정 저장.

        Raises:
            AccountAlreadyExistsError: 같은 이메일의 계정이 이미 존재
        """
        ...

    async def find_by_email(self, email: Email) -> Account | None:
        ...

    async def find_by_id(self, account_id: AccountId) -> Account | None:
        ...

    async def update(self, account: Account) -> Account | None:
        """기존 계정 갱신. 존재하지 않으면 None."""
        ...

    async def delete(self, account_id: AccountId) -> bool:
        ...

    async def exists(self, email: Email) -> bool:
        ...
