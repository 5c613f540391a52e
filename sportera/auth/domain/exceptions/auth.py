"""Auth Domain Exceptions."""

from sportera._shared.exceptions import ErrorKind
from sportera.auth.domain.exceptions.base import DomainError


class TokenRejectedError(DomainError):
    """토큰 거부.

    reason은 로그/내부 분기용이며 응답 메시지에는 노출하지 않습니다.
    (expired | invalid-signature | malformed | account-missing)
    """

    kind = ErrorKind.TOKEN_REJECTED

    def __init__(self, message: str, reason: str) -> None:
        self.reason = reason
        super().__init__(message)


class InvalidTokenError(TokenRejectedError):
    """유효하지 않은 토큰 (서명 불일치, 형식 오류 등)."""

    def __init__(self, message: str = "Invalid token", reason: str = "invalid-signature") -> None:
        super().__init__(message, reason)


class TokenExpiredError(TokenRejectedError):
    """만료된 토큰."""

    def __init__(self) -> None:
        super().__init__("Token has expired", "expired")


class TokenTypeMismatchError(InvalidTokenError):
    """토큰 타입 불일치."""

    def __init__(self, expected: str, actual: str) -> None:
        super().__init__(f"Token type mismatch: expected {expected}, got {actual}", "malformed")
