"""HTTP Schemas (Pydantic Models)."""

from sportera.auth.presentation.http.schemas.auth import (
    AccountResponse,
    AccountSchema,
    LoginData,
    LoginRequestSchema,
    LoginResponse,
    RegisterRequestSchema,
    RegisterResponse,
)

__all__ = [
    "AccountSchema",
    "AccountResponse",
    "RegisterRequestSchema",
    "RegisterResponse",
    "LoginRequestSchema",
    "LoginData",
    "LoginResponse",
]
