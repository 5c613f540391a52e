"""Domain Value Objects."""

from sportera.location.domain.value_objects.contact_info import ContactInfo
from sportera.location.domain.value_objects.coordinates import Coordinates
from sportera.location.domain.value_objects.opening_hours import DailyHours
from sportera.location.domain.value_objects.place_id import PlaceId

__all__ = ["PlaceId", "Coordinates", "DailyHours", "ContactInfo"]
