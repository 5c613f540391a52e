"""Place Domain Exceptions."""

from sportera._shared.exceptions import ErrorKind
from sportera.location.domain.exceptions.base import DomainError


class PlaceNotFoundError(DomainError):
    """장소를 찾을 수 없음."""

    kind = ErrorKind.NOT_FOUND

    def __init__(self, place_id: str | None = None) -> None:
        self.place_id = place_id
        message = f"Place not found: {place_id}" if place_id else "Place not found"
        super().__init__(message)
