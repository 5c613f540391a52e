"""Domain Enums."""

from sportera.location.domain.enums.sport import Sport
from sportera.location.domain.enums.weekday import Weekday

__all__ = ["Sport", "Weekday"]
