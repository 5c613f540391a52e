"""Security Adapters."""

from sportera.auth.infrastructure.security.password_hasher_bcrypt import BcryptPasswordHasher
from sportera.auth.infrastructure.security.token_service_jwt import JwtTokenService

__all__ = ["BcryptPasswordHasher", "JwtTokenService"]
