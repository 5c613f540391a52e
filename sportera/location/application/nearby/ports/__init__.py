"""Application Ports."""

from sportera.location.application.nearby.ports.place_reader import PlaceReader

__all__ = ["PlaceReader"]
