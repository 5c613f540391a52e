"""NearbyPlaceDTO."""

from __future__ import annotations

from dataclasses import dataclass

from sportera.location.domain.entities import Place


@dataclass(frozen=True)
class NearbyPlaceDTO:
    """검색 결과 항목: 장소와 검색 지점으로부터의 거리."""

    place: Place
    distance_m: float
