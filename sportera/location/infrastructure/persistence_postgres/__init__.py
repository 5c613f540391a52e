"""SQLAlchemy Infrastructure."""

from sportera.location.infrastructure.persistence_postgres.models import PlaceModel
from sportera.location.infrastructure.persistence_postgres.place_store_sqla import SqlaPlaceStore

__all__ = ["PlaceModel", "SqlaPlaceStore"]
