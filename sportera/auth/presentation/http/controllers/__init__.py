"""Auth HTTP Controllers."""

from sportera.auth.presentation.http.controllers.auth import router

__all__ = ["router"]
