"""Domain Services."""

from sportera.location.domain.services.geo import haversine_distance_m

__all__ = ["haversine_distance_m"]
