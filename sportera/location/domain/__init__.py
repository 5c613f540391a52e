"""Location Domain Layer."""

from sportera.location.domain.entities import Place
from sportera.location.domain.enums import Sport, Weekday
from sportera.location.domain.value_objects import (
    ContactInfo,
    Coordinates,
    DailyHours,
    PlaceId,
)

__all__ = [
    "Place",
    "PlaceId",
    "Coordinates",
    "DailyHours",
    "ContactInfo",
    "Sport",
    "Weekday",
]
