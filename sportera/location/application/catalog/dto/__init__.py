"""Application DTOs."""

from sportera.location.application.catalog.dto.place_changes import UNSET, PlaceChanges
from sportera.location.application.catalog.dto.place_filter import PlaceFilter
from sportera.location.application.catalog.dto.place_spec import PlaceSpec

__all__ = ["PlaceSpec", "PlaceChanges", "PlaceFilter", "UNSET"]
