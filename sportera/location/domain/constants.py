"""Location Policy Constants.

검색 반경 상한과 같은 정책 값입니다. 알고리즘 코드에는 리터럴로 두지 않습니다.
"""

# 지구 반지름 (구면 근사, meters)
EARTH_RADIUS_METERS = 6_371_000.0

# 주변 검색 반경 상한 (남용 방지 목적, 물리적 한계 아님)
MAX_SEARCH_RADIUS_METERS = 50_000

# 반경 미지정 시 기본 검색 반경
DEFAULT_SEARCH_RADIUS_METERS = 5_000

PLACE_NAME_MAX_LENGTH = 100

LATITUDE_RANGE = (-90.0, 90.0)
LONGITUDE_RANGE = (-180.0, 180.0)
