"""Domain Entities."""

from sportera.auth.domain.entities.account import Account, AccountView
from sportera.auth.domain.entities.base import Entity

__all__ = ["Entity", "Account", "AccountView"]
