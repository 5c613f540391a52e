"""TokenService Port."""

from datetime import timedelta
from typing import Protocol

from sportera.auth.application.common.dto import IssuedToken, TokenClaims
from sportera.auth.domain.value_objects.token_payload import TokenPayload


class TokenService(Protocol):
    """서명된 세션 토큰 발급/검증 인터페이스.

    구현체:
        - JwtTokenService (infrastructure/security/)
    """

    def issue(self, claims: TokenClaims, ttl: timedelta | None = None) -> IssuedToken:
        """토큰 발급. ttl이 없으면 설정된 기본 TTL을 사용합니다."""
        ...

    def verify(self, token: str) -> TokenPayload:
        """서명과 만료를 검증하고 페이로드 반환.

        Raises:
            TokenExpiredError: 만료된 토큰
            InvalidTokenError: 서명 불일치 또는 형식 오류
        """
        ...

    def decode(self, token: str) -> TokenPayload | None:
        """서명/만료 검증 없이 페이로드 해석 (신뢰 불가). 실패 시 None."""
        ...
