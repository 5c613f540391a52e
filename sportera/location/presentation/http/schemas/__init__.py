"""HTTP Schemas (Pydantic Models)."""

from sportera.location.presentation.http.schemas.place import (
    CenterSchema,
    ContactInfoSchema,
    DailyHoursSchema,
    NearbyPlacesResponse,
    PlaceCreateRequest,
    PlaceDeletedResponse,
    PlaceEntry,
    PlaceListResponse,
    PlaceResponse,
    PlaceUpdateRequest,
)

__all__ = [
    "CenterSchema",
    "ContactInfoSchema",
    "DailyHoursSchema",
    "PlaceEntry",
    "NearbyPlacesResponse",
    "PlaceListResponse",
    "PlaceResponse",
    "PlaceCreateRequest",
    "PlaceUpdateRequest",
    "PlaceDeletedResponse",
]
