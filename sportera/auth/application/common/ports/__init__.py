"""Application Ports."""

from sportera.auth.application.common.ports.account_store import AccountStore
from sportera.auth.application.common.ports.password_hasher import PasswordHasher
from sportera.auth.application.common.ports.token_service import TokenService

__all__ = ["AccountStore", "PasswordHasher", "TokenService"]
