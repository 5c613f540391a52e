"""Domain Entities."""

from sportera.location.domain.entities.place import Place

__all__ = ["Place"]
