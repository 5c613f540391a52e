"""Place Catalog Application Layer."""

from sportera.location.application.catalog.dto import PlaceChanges, PlaceFilter, PlaceSpec
from sportera.location.application.catalog.ports import PlaceStore
from sportera.location.application.catalog.services import PlaceCatalogService

__all__ = ["PlaceSpec", "PlaceChanges", "PlaceFilter", "PlaceStore", "PlaceCatalogService"]
