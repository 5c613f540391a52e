"""Auth Application Exceptions."""

from sportera._shared.exceptions import ErrorKind
from sportera.auth.application.common.exceptions.base import ApplicationError

GENERIC_LOGIN_FAILURE = "Invalid email or password"


class AuthenticationError(ApplicationError):
    """인증 실패.

    계정 존재 여부가 드러나지 않도록 메시지는 항상 동일합니다.
    """

    kind = ErrorKind.AUTH_FAILURE

    def __init__(self) -> None:
        super().__init__(GENERIC_LOGIN_FAILURE)


class PermissionDeniedError(ApplicationError):
    """권한 없음 (단체 계정 전용 기능, 소유자 전용 수정 등)."""

    kind = ErrorKind.FORBIDDEN

    def __init__(self, reason: str = "Permission denied") -> None:
        super().__init__(reason)
