"""Auth Queries."""

from sportera.auth.application.queries.get_account import GetAccountQueryService

__all__ = ["GetAccountQueryService"]
