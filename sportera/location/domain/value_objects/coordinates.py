"""Coordinates Value Object."""

from __future__ import annotations

from dataclasses import dataclass

from sportera.location.domain.constants import LATITUDE_RANGE, LONGITUDE_RANGE
from sportera.location.domain.exceptions.validation import ValidationError


@dataclass(frozen=True, slots=True)
class Coordinates:
    """위도/경도 좌표 (WGS84, degrees)."""

    latitude: float
    longitude: float

    def __post_init__(self) -> None:
        """좌표 유효성 검증. NaN/inf도 범위 비교에서 거부된다."""
        lat_min, lat_max = LATITUDE_RANGE
        lng_min, lng_max = LONGITUDE_RANGE
        if not isinstance(self.latitude, (int, float)) or not lat_min <= self.latitude <= lat_max:
            raise ValidationError("latitude", f"must be between {lat_min:g} and {lat_max:g}")
        if not isinstance(self.longitude, (int, float)) or not lng_min <= self.longitude <= lng_max:
            raise ValidationError("longitude", f"must be between {lng_min:g} and {lng_max:g}")

    @classmethod
    def from_lng_lat(cls, pair: tuple[float, float]) -> "Coordinates":
        """GeoJSON 순서([longitude, latitude])에서 생성."""
        longitude, latitude = pair
        return cls(latitude=latitude, longitude=longitude)

    def as_lng_lat(self) -> tuple[float, float]:
        return (self.longitude, self.latitude)
