"""Application Services."""

from sportera.location.application.catalog.services.place_catalog import PlaceCatalogService

__all__ = ["PlaceCatalogService"]
