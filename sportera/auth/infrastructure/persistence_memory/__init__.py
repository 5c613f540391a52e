"""In-memory Persistence."""

from sportera.auth.infrastructure.persistence_memory.account_store_memory import (
    InMemoryAccountStore,
)

__all__ = ["InMemoryAccountStore"]
