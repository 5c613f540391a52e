"""Gateway Exceptions."""

from sportera._shared.exceptions import ErrorKind
from sportera.location.application.common.exceptions.base import ApplicationError


class GatewayError(ApplicationError):
    """저장소 등 외부 협력자 오류. 재시도하지 않고 호출자에게 그대로 전달."""

    kind = ErrorKind.DEPENDENCY_FAILURE


class DataMapperError(GatewayError):
    """데이터 매퍼(Repository) 오류."""

    def __init__(self, operation: str, reason: str) -> None:
        self.operation = operation
        super().__init__(f"Data mapper error during {operation}: {reason}")
