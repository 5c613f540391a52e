"""In-memory Account Store.

AccountStore 포트의 구현체입니다.
"""

from __future__ import annotations

import asyncio

from sportera.auth.domain.entities.account import Account
from sportera.auth.domain.exceptions import AccountAlreadyExistsError
from sportera.auth.domain.value_objects import AccountId, Email


class InMemoryAccountStore:
    """dict 기반 계정 저장소.

    이메일 인덱스로 유일성을 보장합니다. 쓰기는 asyncio.Lock으로 직렬화됩니다.
    """

    def __init__(self) -> None:
        self._accounts: dict[AccountId, Account] = {}
        self._by_email: dict[str, AccountId] = {}
        self._lock = asyncio.Lock()

    async def save(self, account: Account) -> Account:
        async with self._lock:
            if account.email.value in self._by_email:
                raise AccountAlreadyExistsError()
            self._accounts[account.id_] = account
            self._by_email[account.email.value] = account.id_
        return account

    async def find_by_email(self, email: Email) -> Account | None:
        account_id = self._by_email.get(email.value)
        return self._accounts.get(account_id) if account_id else None

    async def find_by_id(self, account_id: AccountId) -> Account | None:
        return self._accounts.get(account_id)

    async def update(self, account: Account) -> Account | None:
        async with self._lock:
            current = self._accounts.get(account.id_)
            if current is None:
                return None
            if current.email != account.email:
                if account.email.value in self._by_email:
                    raise AccountAlreadyExistsError()
                del self._by_email[current.email.value]
                self._by_email[account.email.value] = account.id_
            self._accounts[account.id_] = account
        return account

    async def delete(self, account_id: AccountId) -> bool:
        async with self._lock:
            account = self._accounts.pop(account_id, None)
            if account is None:
                return False
            del self._by_email[account.email.value]
        return True

    async def exists(self, email: Email) -> bool:
        return email.value in self._by_email
