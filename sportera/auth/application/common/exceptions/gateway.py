"""Gateway Exceptions."""

from sportera._shared.exceptions import ErrorKind
from sportera.auth.application.common.exceptions.base import ApplicationError


class GatewayError(ApplicationError):
    """Gateway 오류 베이스 클래스."""

    kind = ErrorKind.DEPENDENCY_FAILURE


class DataMapperError(GatewayError):
    """데이터 매퍼(Store) 오류."""

    def __init__(self, operation: str, reason: str) -> None:
        self.operation = operation
        super().__init__(f"Data mapper error during {operation}: {reason}")


class CorruptedPasswordHashError(GatewayError):
    """저장된 비밀번호 해시를 해석할 수 없음."""

    def __init__(self) -> None:
        super().__init__("Stored password hash is malformed")
