"""Nearby Place Application Layer."""

from sportera.location.application.nearby.dto import NearbyPlaceDTO, SearchRequest
from sportera.location.application.nearby.ports import PlaceReader
from sportera.location.application.nearby.queries import GetNearbyPlacesQuery

__all__ = ["SearchRequest", "NearbyPlaceDTO", "PlaceReader", "GetNearbyPlacesQuery"]
