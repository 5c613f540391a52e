"""Domain Exceptions."""

from sportera.location.domain.exceptions.base import DomainError
from sportera.location.domain.exceptions.place import PlaceNotFoundError
from sportera.location.domain.exceptions.validation import ValidationError

__all__ = ["DomainError", "PlaceNotFoundError", "ValidationError"]
