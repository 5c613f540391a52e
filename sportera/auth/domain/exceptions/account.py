"""Account Domain Exceptions."""

from sportera._shared.exceptions import ErrorKind
from sportera.auth.domain.exceptions.base import DomainError


class AccountNotFoundError(DomainError):
    """계정을 찾을 수 없음."""

    kind = ErrorKind.NOT_FOUND

    def __init__(self, account_id: str | None = None) -> None:
        message = f"Account not found: {account_id}" if account_id else "Account not found"
        super().__init__(message)


class AccountAlreadyExistsError(DomainError):
    """같은 이메일의 계정이 이미 존재함."""

    kind = ErrorKind.CONFLICT

    def __init__(self) -> None:
        super().__init__("An account with this email already exists")


class InsufficientPointsError(DomainError):
    """포인트 잔액 부족."""

    kind = ErrorKind.VALIDATION_FAILURE

    def __init__(self, balance: int, requested: int) -> None:
        self.field = "points"
        self.balance = balance
        self.requested = requested
        super().__init__(f"Insufficient points: balance {balance}, requested {requested}")
