"""RegisterAccount Command.

이메일/비밀번호 계정 등록 Use Case입니다.
"""

from __future__ import annotations

import asyncio
import logging

from sportera._shared.clock import Clock, utc_now
from sportera.auth.application.common.dto import AccountView, RegisterRequest
from sportera.auth.application.common.ports import AccountStore, PasswordHasher
from sportera.auth.domain.constants import PASSWORD_MIN_LENGTH
from sportera.auth.domain.entities.account import (
    Account,
    validate_account_name,
    validate_organization,
)
from sportera.auth.domain.enums.account_kind import AccountKind
from sportera.auth.domain.exceptions import AccountAlreadyExistsError, ValidationError
from sportera.auth.domain.ports import AccountIdGenerator
from sportera.auth.domain.value_objects import Email

logger = logging.getLogger(__name__)


def validate_password(password: object) -> str:
    if not isinstance(password, str) or len(password) < PASSWORD_MIN_LENGTH:
        raise ValidationError(
            "password", f"must be at least {PASSWORD_MIN_LENGTH} characters"
        )
    return password


class RegisterAccountInteractor:
    """계정 등록 Interactor.

    1. 입력 검증 (이름, 이메일, 비밀번호, 단체 정보)
    2. 이메일 중복 확인 (빠른 경로)
    3. 비밀번호 해시
    4. 저장 (저장소의 유일성 제약이 최종 판정)
    """

    def __init__(
        self,
        account_store: AccountStore,
        password_hasher: PasswordHasher,
        id_generator: AccountIdGenerator,
        clock: Clock = utc_now,
    ) -> None:
        self._account_store = account_store
        self._password_hasher = password_hasher
        self._id_generator = id_generator
        self._clock = clock

    async def execute(self, request: RegisterRequest) -> AccountView:
        """계정 등록.

        Raises:
            ValidationError: 입력값 검증 실패 (저장소에 접근하지 않음)
            AccountAlreadyExistsError: 같은 이메일의 계정 존재
        """
        # 1. 입력 검증
        name = validate_account_name(request.name)
        email = Email.parse(request.email)
        password = validate_password(request.password)
        try:
            kind = AccountKind(request.kind)
        except ValueError as e:
            raise ValidationError("kind", "must be standard or organization") from e
        validate_organization(kind, request.organization_name, request.organization_description)

        # 2. 중복 확인
        if await self._account_store.exists(email):
            raise AccountAlreadyExistsError()

        # 3. 해시 (bcrypt는 CPU 작업이므로 스레드에서 실행)
        password_hash = await asyncio.to_thread(self._password_hasher.hash, password)

        # 4. 저장
        account = Account.register(
            id_=self._id_generator(),
            name=name,
            email=email,
            password_hash=password_hash,
            kind=kind,
            now=self._clock(),
            organization_name=request.organization_name,
            organization_description=request.organization_description,
        )
        saved = await self._account_store.save(account)

        logger.info(
            "Account registered",
            extra={"account_id": str(saved.id_), "kind": saved.kind.value},
        )
        return saved.to_public()
