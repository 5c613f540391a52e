"""Application Queries."""

from sportera.location.application.nearby.queries.get_nearby_places import GetNearbyPlacesQuery

__all__ = ["GetNearbyPlacesQuery"]
