"""Application Exceptions."""

from sportera.auth.application.common.exceptions.auth import (
    AuthenticationError,
    PermissionDeniedError,
)
from sportera.auth.application.common.exceptions.base import ApplicationError
from sportera.auth.application.common.exceptions.gateway import (
    CorruptedPasswordHashError,
    DataMapperError,
    GatewayError,
)

__all__ = [
    "ApplicationError",
    "AuthenticationError",
    "PermissionDeniedError",
    "GatewayError",
    "DataMapperError",
    "CorruptedPasswordHashError",
]
