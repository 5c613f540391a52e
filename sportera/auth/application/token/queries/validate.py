"""ValidateToken Query.

Bearer 토큰 검증 Use Case입니다.
"""

from __future__ import annotations

import logging

from sportera.auth.application.common.dto import ValidatedAccount
from sportera.auth.application.common.ports import AccountStore, TokenService
from sportera.auth.domain.enums.token_type import TokenType
from sportera.auth.domain.exceptions import InvalidTokenError, TokenTypeMismatchError

logger = logging.getLogger(__name__)


class ValidateTokenQueryService:
    """토큰 검증 Query Service.

    서명/만료 검증 후 계정이 아직 존재하는지 확인합니다.
    """

    def __init__(self, token_service: TokenService, account_store: AccountStore) -> None:
        self._token_service = token_service
        self._account_store = account_store

    async def execute(self, token: str) -> ValidatedAccount:
        """토큰 검증.

        Raises:
            TokenExpiredError: 만료된 토큰
            InvalidTokenError: 서명 불일치, 형식 오류 또는 삭제된 계정
        """
        payload = self._token_service.verify(token)
        if payload.token_type is not TokenType.ACCESS:
            raise TokenTypeMismatchError(TokenType.ACCESS.value, payload.token_type.value)

        account = await self._account_store.find_by_id(payload.account_id)
        if account is None:
            logger.info(
                "Token rejected",
                extra={"reason": "account-missing", "account_id": str(payload.account_id)},
            )
            raise InvalidTokenError("Account no longer exists", reason="account-missing")

        return ValidatedAccount(
            account_id=str(account.id_),
            email=account.email.value,
            kind=account.kind,
            jti=payload.jti,
        )
