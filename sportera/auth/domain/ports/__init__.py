"""Domain Ports."""

from sportera.auth.domain.ports.account_id_generator import AccountIdGenerator

__all__ = ["AccountIdGenerator"]
