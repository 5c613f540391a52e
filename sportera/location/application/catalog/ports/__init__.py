"""Application Ports."""

from sportera.location.application.catalog.ports.place_store import PlaceStore

__all__ = ["PlaceStore"]
