"""Domain Enums."""

from sportera.auth.domain.enums.account_kind import AccountKind
from sportera.auth.domain.enums.token_type import TokenType

__all__ = ["AccountKind", "TokenType"]
