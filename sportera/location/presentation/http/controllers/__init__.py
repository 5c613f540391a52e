"""Location HTTP Controllers."""

from sportera.location.presentation.http.controllers.places import router

__all__ = ["router"]
