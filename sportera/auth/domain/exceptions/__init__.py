"""Domain Exceptions."""

from sportera.auth.domain.exceptions.account import (
    AccountAlreadyExistsError,
    AccountNotFoundError,
    InsufficientPointsError,
)
from sportera.auth.domain.exceptions.auth import (
    InvalidTokenError,
    TokenExpiredError,
    TokenRejectedError,
    TokenTypeMismatchError,
)
from sportera.auth.domain.exceptions.base import DomainError
from sportera.auth.domain.exceptions.validation import InvalidEmailError, ValidationError

__all__ = [
    "DomainError",
    "AccountNotFoundError",
    "AccountAlreadyExistsError",
    "InsufficientPointsError",
    "TokenRejectedError",
    "InvalidTokenError",
    "TokenExpiredError",
    "TokenTypeMismatchError",
    "InvalidEmailError",
    "ValidationError",
]
