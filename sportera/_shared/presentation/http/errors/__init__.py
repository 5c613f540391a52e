"""HTTP Error Handling."""

from sportera._shared.presentation.http.errors.handlers import register_exception_handlers
from sportera._shared.presentation.http.errors.translators import (
    STATUS_BY_KIND,
    translate_error,
)

__all__ = ["register_exception_handlers", "translate_error", "STATUS_BY_KIND"]
