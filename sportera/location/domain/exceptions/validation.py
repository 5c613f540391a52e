"""Validation Domain Exceptions."""

from sportera._shared.exceptions import ErrorKind
from sportera.location.domain.exceptions.base import DomainError


class ValidationError(DomainError):
    """값 검증 실패. 어떤 필드가 왜 거부되었는지 담는다."""

    kind = ErrorKind.VALIDATION_FAILURE

    def __init__(self, field: str, reason: str) -> None:
        self.field = field
        self.reason = reason
        super().__init__(f"Validation error for '{field}': {reason}")
