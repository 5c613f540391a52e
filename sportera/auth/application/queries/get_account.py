"""GetAccount Query."""

from __future__ import annotations

from sportera.auth.application.common.dto import AccountView
from sportera.auth.application.common.ports import AccountStore
from sportera.auth.domain.exceptions import AccountNotFoundError
from sportera.auth.domain.value_objects import AccountId


class GetAccountQueryService:
    """계정 공개 정보 조회."""

    def __init__(self, account_store: AccountStore) -> None:
        self._account_store = account_store

    async def execute(self, account_id: str) -> AccountView:
        """Raises:
            AccountNotFoundError: 존재하지 않는 계정
        """
        account = await self._account_store.find_by_id(AccountId.from_string(account_id))
        if account is None:
            raise AccountNotFoundError(account_id)
        return account.to_public()
