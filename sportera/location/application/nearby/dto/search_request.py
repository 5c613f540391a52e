"""SearchRequest DTO."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SearchRequest:
    """주변 장소 검색 요청."""

    latitude: float
    longitude: float
    radius_m: float
