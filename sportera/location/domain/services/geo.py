"""Great-circle distance.

모든 근접 판정이 공유하는 거리 계산의 단일 출처입니다.
"""

from __future__ import annotations

import math

from sportera.location.domain.constants import EARTH_RADIUS_METERS
from sportera.location.domain.value_objects.coordinates import Coordinates


def haversine_distance_m(
    point_a: Coordinates,
    point_b: Coordinates,
    *,
    radius_m: float = EARTH_RADIUS_METERS,
) -> float:
    """두 좌표 사이의 대원 거리(meters).

    구면 지구 근사(반지름 6,371,000m)를 사용합니다. 극 근처의 부동소수점
    오차로 음수나 NaN이 나오지 않도록 중간값을 [0, 1]로 clamp 합니다.
    """
    phi1 = math.radians(point_a.latitude)
    phi2 = math.radians(point_b.latitude)
    dphi = phi2 - phi1
    dlambda = math.radians(point_b.longitude - point_a.longitude)

    sin_dphi = math.sin(dphi / 2.0)
    sin_dlambda = math.sin(dlambda / 2.0)

    a = sin_dphi**2 + math.cos(phi1) * math.cos(phi2) * sin_dlambda**2
    a = min(1.0, max(0.0, a))
    c = 2.0 * math.asin(math.sqrt(a))
    return radius_m * c
