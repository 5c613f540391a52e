"""Infrastructure Adapters."""

from sportera.auth.infrastructure.adapters.account_id_generator_uuid import (
    UuidAccountIdGenerator,
)

__all__ = ["UuidAccountIdGenerator"]
