"""Login Command.

이메일/비밀번호 로그인 Use Case입니다.
"""

from __future__ import annotations

import asyncio
import logging
from datetime import timedelta

from sportera.auth.application.common.dto import LoginRequest, LoginResult, TokenClaims
from sportera.auth.application.common.exceptions import AuthenticationError
from sportera.auth.application.common.ports import (
    AccountStore,
    PasswordHasher,
    TokenService,
)
from sportera.auth.domain.exceptions import InvalidEmailError
from sportera.auth.domain.value_objects import Email

logger = logging.getLogger(__name__)


class LoginInteractor:
    """로그인 Interactor.

    1. 이메일 정규화
    2. 계정 조회
    3. 비밀번호 검증
    4. 토큰 발급

    실패 원인과 관계없이 동일한 AuthenticationError를 발생시킵니다.
    """

    def __init__(
        self,
        account_store: AccountStore,
        password_hasher: PasswordHasher,
        token_service: TokenService,
        token_ttl: timedelta,
    ) -> None:
        self._account_store = account_store
        self._password_hasher = password_hasher
        self._token_service = token_service
        self._token_ttl = token_ttl

    async def execute(self, request: LoginRequest) -> LoginResult:
        """로그인.

        Raises:
            AuthenticationError: 이메일 또는 비밀번호 불일치
        """
        # 1. 이메일 정규화
        try:
            email = Email.parse(request.email)
        except InvalidEmailError as e:
            raise AuthenticationError() from e
        if not request.password:
            raise AuthenticationError()

        # 2. 계정 조회
        account = await self._account_store.find_by_email(email)
        if account is None:
            logger.info("Login failed", extra={"reason": "unknown_email"})
            raise AuthenticationError()

        # 3. 비밀번호 검증 (bcrypt는 스레드에서 실행)
        verified = await asyncio.to_thread(
            self._password_hasher.verify, request.password, account.password_hash
        )
        if not verified:
            logger.info(
                "Login failed",
                extra={"reason": "wrong_password", "account_id": str(account.id_)},
            )
            raise AuthenticationError()

        # 4. 토큰 발급
        issued = self._token_service.issue(
            TokenClaims(
                account_id=str(account.id_),
                email=account.email.value,
                kind=account.kind,
            ),
            ttl=self._token_ttl,
        )

        logger.info(
            "Login successful",
            extra={"account_id": str(account.id_), "jti": issued.jti},
        )
        return LoginResult(
            account=account.to_public(),
            token=issued.token,
            expires_at=issued.expires_at,
        )
