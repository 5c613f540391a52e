"""Application DTOs."""

from sportera.location.application.nearby.dto.nearby_place import NearbyPlaceDTO
from sportera.location.application.nearby.dto.search_request import SearchRequest

__all__ = ["NearbyPlaceDTO", "SearchRequest"]
