"""LoginInteractor 단위 테스트."""

import asyncio
import time
from datetime import datetime, timedelta, timezone

import pytest
import pytest_asyncio

from sportera.auth.application.commands import LoginInteractor, RegisterAccountInteractor
from sportera.auth.application.common.dto import LoginRequest, RegisterRequest
from sportera.auth.application.common.exceptions import AuthenticationError
from sportera.auth.infrastructure.adapters import UuidAccountIdGenerator
from sportera.auth.infrastructure.persistence_memory import InMemoryAccountStore
from sportera.auth.infrastructure.security import BcryptPasswordHasher, JwtTokenService

NOW = datetime(2024, 6, 3, 10, 0, tzinfo=timezone.utc)
SECRET = "test-secret-key-with-enough-length-for-hs256"


class TestLoginInteractor:
    """로그인 테스트."""

    @pytest.fixture
    def store(self) -> InMemoryAccountStore:
        return InMemoryAccountStore()

    @pytest.fixture
    def hasher(self) -> BcryptPasswordHasher:
        return BcryptPasswordHasher(rounds=4)

    @pytest.fixture
    def token_service(self) -> JwtTokenService:
        return JwtTokenService(SECRET, default_ttl=timedelta(days=7), clock=lambda: NOW)

    @pytest_asyncio.fixture
    async def registered(self, store: InMemoryAccountStore, hasher: BcryptPasswordHasher):
        interactor = RegisterAccountInteractor(store, hasher, UuidAccountIdGenerator())
        return await interactor.execute(
            RegisterRequest(name="Camille", email="camille@example.fr", password="secret1")
        )

    @pytest.fixture
    def interactor(
        self,
        store: InMemoryAccountStore,
        hasher: BcryptPasswordHasher,
        token_service: JwtTokenService,
    ) -> LoginInteractor:
        return LoginInteractor(store, hasher, token_service, token_ttl=timedelta(days=7))

    @pytest.mark.asyncio
    async def test_login_issues_verifiable_token(
        self,
        interactor: LoginInteractor,
        token_service: JwtTokenService,
        registered,
    ) -> None:
        # Act
        result = await interactor.execute(
            LoginRequest(email="  CAMILLE@example.fr", password="secret1")
        )

        # Assert
        assert result.account.id == registered.id
        assert result.expires_at == NOW + timedelta(days=7)
        payload = token_service.verify(result.token)
        assert str(payload.account_id) == registered.id
        assert payload.email == "camille@example.fr"

    @pytest.mark.asyncio
    async def test_wrong_password_and_unknown_email_look_identical(
        self, interactor: LoginInteractor, registered
    ) -> None:
        with pytest.raises(AuthenticationError) as wrong_password:
            await interactor.execute(LoginRequest(email="camille@example.fr", password="wrong!!"))
        with pytest.raises(AuthenticationError) as unknown_email:
            await interactor.execute(LoginRequest(email="nobody@example.fr", password="secret1"))

        assert wrong_password.value.message == unknown_email.value.message
        assert wrong_password.value.kind == unknown_email.value.kind

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("email", "password"),
        [("", "secret1"), ("not-an-email", "secret1"), ("camille@example.fr", "")],
    )
    async def test_blank_or_malformed_credentials(
        self, interactor: LoginInteractor, registered, email: str, password: str
    ) -> None:
        with pytest.raises(AuthenticationError):
            await interactor.execute(LoginRequest(email=email, password=password))


class SlowVerifyHasher(BcryptPasswordHasher):
    """검증 한 번에 delay초가 걸리는 hasher."""

    def __init__(self, delay: float) -> None:
        super().__init__(rounds=4)
        self._delay = delay

    def verify(self, secret: str, hashed) -> bool:
        time.sleep(self._delay)
        return super().verify(secret, hashed)


class TestLoginDoesNotBlockEventLoop:
    """비밀번호 검증 중에도 다른 코루틴이 실행되는지 확인"""

    @pytest.mark.asyncio
    async def test_other_coroutines_run_while_verifying(self) -> None:
        # Arrange
        store = InMemoryAccountStore()
        hasher = SlowVerifyHasher(delay=0.2)
        await RegisterAccountInteractor(store, hasher, UuidAccountIdGenerator()).execute(
            RegisterRequest(name="Camille", email="camille@example.fr", password="secret1")
        )
        token_service = JwtTokenService(SECRET, default_ttl=timedelta(days=7), clock=lambda: NOW)
        interactor = LoginInteractor(store, hasher, token_service, token_ttl=timedelta(days=7))

        ticks = 0

        async def heartbeat() -> None:
            nonlocal ticks
            while True:
                await asyncio.sleep(0.01)
                ticks += 1

        beat = asyncio.create_task(heartbeat())

        # Act
        try:
            await interactor.execute(
                LoginRequest(email="camille@example.fr", password="secret1")
            )
        finally:
            beat.cancel()

        # Assert
        assert ticks >= 5
