"""BcryptPasswordHasher / JwtTokenService 테스트."""

from datetime import datetime, timedelta, timezone

import jwt
import pytest

from sportera.auth.application.common.dto import TokenClaims
from sportera.auth.application.common.exceptions import CorruptedPasswordHashError
from sportera.auth.domain.enums import AccountKind, TokenType
from sportera.auth.domain.exceptions import InvalidTokenError, TokenExpiredError
from sportera.auth.domain.value_objects import AccountId, PasswordHash, TokenPayload
from sportera.auth.infrastructure.security import BcryptPasswordHasher, JwtTokenService

NOW = datetime(2024, 6, 3, 10, 0, tzinfo=timezone.utc)
SECRET = "test-secret-key-with-enough-length-for-hs256"


class TestBcryptPasswordHasher:
    """bcrypt 해시 테스트."""

    @pytest.fixture
    def hasher(self) -> BcryptPasswordHasher:
        return BcryptPasswordHasher(rounds=4)

    def test_hash_twice_differs_and_both_verify(self, hasher: BcryptPasswordHasher) -> None:
        first = hasher.hash("secret1")
        second = hasher.hash("secret1")

        assert first != second
        assert hasher.verify("secret1", first)
        assert hasher.verify("secret1", second)

    def test_wrong_password(self, hasher: BcryptPasswordHasher) -> None:
        assert hasher.verify("wrong", hasher.hash("secret1")) is False

    def test_long_password_is_supported(self, hasher: BcryptPasswordHasher) -> None:
        password = "é" * 80
        assert hasher.verify(password, hasher.hash(password))

    def test_corrupted_hash_raises(self, hasher: BcryptPasswordHasher) -> None:
        with pytest.raises(CorruptedPasswordHashError):
            hasher.verify("secret1", PasswordHash(value="not-a-bcrypt-hash"))


class TestJwtTokenService:
    """JWT 발급/검증 테스트."""

    @pytest.fixture
    def claims(self) -> TokenClaims:
        return TokenClaims(
            account_id=str(AccountId.generate()),
            email="camille@example.fr",
            kind=AccountKind.STANDARD,
        )

    @pytest.fixture
    def service(self) -> JwtTokenService:
        return JwtTokenService(SECRET, default_ttl=timedelta(days=7), clock=lambda: NOW)

    def test_issue_verify_round_trip(self, service: JwtTokenService, claims: TokenClaims) -> None:
        # Act
        issued = service.issue(claims)
        payload = service.verify(issued.token)

        # Assert
        assert str(payload.account_id) == claims.account_id
        assert payload.email == claims.email
        assert payload.kind is AccountKind.STANDARD
        assert payload.token_type is TokenType.ACCESS
        assert payload.jti == issued.jti
        assert payload.exp - payload.iat == int(timedelta(days=7).total_seconds())
        assert issued.expires_at == NOW + timedelta(days=7)

    def test_custom_ttl(self, service: JwtTokenService, claims: TokenClaims) -> None:
        issued = service.issue(claims, ttl=timedelta(minutes=5))
        assert issued.expires_at == NOW + timedelta(minutes=5)

    def test_each_token_has_unique_jti(self, service: JwtTokenService, claims: TokenClaims) -> None:
        assert service.issue(claims).jti != service.issue(claims).jti

    def test_expired_token(self, claims: TokenClaims) -> None:
        issuer = JwtTokenService(
            SECRET, default_ttl=timedelta(hours=1), clock=lambda: NOW - timedelta(days=1)
        )
        verifier = JwtTokenService(SECRET, default_ttl=timedelta(hours=1), clock=lambda: NOW)

        with pytest.raises(TokenExpiredError) as exc_info:
            verifier.verify(issuer.issue(claims).token)
        assert exc_info.value.reason == "expired"

    def test_wrong_signature(self, service: JwtTokenService, claims: TokenClaims) -> None:
        other = JwtTokenService(
            "another-secret-key-with-enough-length-too", default_ttl=timedelta(days=7)
        )

        with pytest.raises(InvalidTokenError) as exc_info:
            service.verify(other.issue(claims).token)
        assert exc_info.value.reason == "invalid-signature"

    def test_malformed_token(self, service: JwtTokenService) -> None:
        with pytest.raises(InvalidTokenError) as exc_info:
            service.verify("not.a.token")
        assert exc_info.value.reason == "malformed"

    def test_missing_claims(self, service: JwtTokenService) -> None:
        token = jwt.encode({"sub": "x", "jti": "j", "iat": 0, "exp": 9_999_999_999}, SECRET)

        with pytest.raises(InvalidTokenError) as exc_info:
            service.verify(token)
        assert exc_info.value.reason == "malformed"

    def test_decode_without_verification(
        self, service: JwtTokenService, claims: TokenClaims
    ) -> None:
        payload = service.decode(service.issue(claims).token)

        assert isinstance(payload, TokenPayload)
        assert str(payload.account_id) == claims.account_id
        assert payload.token_type is TokenType.ACCESS
        assert service.decode("garbage") is None

    def test_decode_ignores_signature_and_expiry(self, claims: TokenClaims) -> None:
        """다른 키로 서명되고 만료된 토큰도 해석만은 가능"""
        issuer = JwtTokenService(
            "another-secret-key-with-enough-length-too",
            default_ttl=timedelta(hours=1),
            clock=lambda: NOW - timedelta(days=1),
        )
        reader = JwtTokenService(SECRET, default_ttl=timedelta(hours=1), clock=lambda: NOW)

        payload = reader.decode(issuer.issue(claims).token)

        assert payload is not None
        assert payload.email == claims.email

    def test_decode_missing_claims_returns_none(self, service: JwtTokenService) -> None:
        token = jwt.encode({"sub": "x", "jti": "j", "iat": 0, "exp": 9_999_999_999}, SECRET)
        assert service.decode(token) is None
