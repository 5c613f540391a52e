"""In-memory Persistence."""

from sportera.location.infrastructure.persistence_memory.place_store_memory import (
    InMemoryPlaceStore,
)
from sportera.location.infrastructure.persistence_memory.seed import DEMO_PLACES, build_demo_places

__all__ = ["InMemoryPlaceStore", "DEMO_PLACES", "build_demo_places"]
