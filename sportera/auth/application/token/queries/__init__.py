"""Token Queries."""

from sportera.auth.application.token.queries.validate import ValidateTokenQueryService

__all__ = ["ValidateTokenQueryService"]
