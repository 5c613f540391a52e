"""Clock helpers."""

from datetime import datetime, timezone
from typing import Callable

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    """timezone-aware 현재 UTC 시각."""
    return datetime.now(timezone.utc)
