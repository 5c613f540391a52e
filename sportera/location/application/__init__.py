"""Location Application Layer."""

from sportera.location.application.catalog import (
    PlaceCatalogService,
    PlaceChanges,
    PlaceFilter,
    PlaceSpec,
    PlaceStore,
)
from sportera.location.application.nearby import (
    GetNearbyPlacesQuery,
    NearbyPlaceDTO,
    PlaceReader,
    SearchRequest,
)

__all__ = [
    "PlaceSpec",
    "PlaceChanges",
    "PlaceFilter",
    "PlaceStore",
    "PlaceCatalogService",
    "SearchRequest",
    "NearbyPlaceDTO",
    "PlaceReader",
    "GetNearbyPlacesQuery",
]
