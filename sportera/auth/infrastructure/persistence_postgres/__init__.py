"""SQLAlchemy Persistence."""

from sportera.auth.infrastructure.persistence_postgres.account_store_sqla import SqlaAccountStore
from sportera.auth.infrastructure.persistence_postgres.models import AccountModel

__all__ = ["AccountModel", "SqlaAccountStore"]
