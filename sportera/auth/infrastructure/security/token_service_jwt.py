"""JWT Token Service.

TokenService 포트의 구현체입니다.
"""

from __future__ import annotations

import logging
import uuid
from datetime import timedelta

import jwt

from sportera._shared.clock import Clock, utc_now
from sportera.auth.application.common.dto import IssuedToken, TokenClaims
from sportera.auth.domain.enums.token_type import TokenType
from sportera.auth.domain.exceptions import InvalidTokenError, TokenExpiredError
from sportera.auth.domain.value_objects.token_payload import TokenPayload

logger = logging.getLogger(__name__)

REQUIRED_CLAIMS = ["sub", "jti", "iat", "exp"]


class JwtTokenService:
    """PyJWT 기반 토큰 서비스 (HMAC 서명).

    Args:
        secret_key: 서명 키
        algorithm: 서명 알고리즘 (기본 HS256)
        default_ttl: ttl 미지정 시 만료 시간
        clock: 현재 시각 (테스트에서 고정 시각 주입)
    """

    def __init__(
        self,
        secret_key: str,
        default_ttl: timedelta,
        algorithm: str = "HS256",
        clock: Clock = utc_now,
    ) -> None:
        self._secret_key = secret_key
        self._algorithm = algorithm
        self._default_ttl = default_ttl
        self._clock = clock

    def issue(self, claims: TokenClaims, ttl: timedelta | None = None) -> IssuedToken:
        issued_at = self._clock()
        expires_at = issued_at + (ttl or self._default_ttl)
        jti = uuid.uuid4().hex

        payload = {
            "sub": claims.account_id,
            "email": claims.email,
            "kind": claims.kind.value,
            "type": TokenType.ACCESS.value,
            "jti": jti,
            "iat": int(issued_at.timestamp()),
            "exp": int(expires_at.timestamp()),
        }
        token = jwt.encode(payload, self._secret_key, algorithm=self._algorithm)
        return IssuedToken(token=token, jti=jti, expires_at=expires_at)

    def verify(self, token: str) -> TokenPayload:
        now = self._clock()
        try:
            data = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self._algorithm],
                options={"require": REQUIRED_CLAIMS, "verify_exp": False, "verify_iat": False},
            )
        except jwt.InvalidSignatureError as e:
            raise InvalidTokenError("Invalid token signature", reason="invalid-signature") from e
        except jwt.PyJWTError as e:
            logger.debug("Token decode failed", extra={"error": type(e).__name__})
            raise InvalidTokenError("Malformed token", reason="malformed") from e

        payload = TokenPayload.from_dict(data)
        # 만료는 주입된 clock 기준으로 판정
        if payload.exp <= int(now.timestamp()):
            raise TokenExpiredError()
        return payload

    def decode(self, token: str) -> TokenPayload | None:
        """서명/만료 검증 없이 클레임만 해석. 신뢰할 수 없는 값이므로 조회 용도로만 사용."""
        try:
            data = jwt.decode(token, options={"verify_signature": False})
            return TokenPayload.from_dict(data)
        except (jwt.PyJWTError, InvalidTokenError):
            return None
