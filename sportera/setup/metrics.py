"""SportEra Prometheus 메트릭

수집 항목:
- 주변 검색 처리 시간 및 결과 개수
- 로그인/회원가입 시도 결과 카운터
"""

from fastapi import APIRouter
from fastapi.responses import Response
from prometheus_client import (
    CONTENT_TYPE_LATEST,
    CollectorRegistry,
    Counter,
    Histogram,
    generate_latest,
)

from sportera.setup.constants import (
    BUCKETS_RESULT_COUNT,
    BUCKETS_SEARCH,
    METRIC_AUTH_ATTEMPTS,
    METRIC_NEARBY_DURATION,
    METRIC_NEARBY_RESULTS,
    METRICS_PATH,
    STATUS_ERROR,
    STATUS_SUCCESS,
)

REGISTRY = CollectorRegistry(auto_describe=True)

# =============================================================================
# Histogram: 주변 검색
# =============================================================================

NEARBY_SEARCH_DURATION = Histogram(
    name=METRIC_NEARBY_DURATION,
    documentation="Time spent scanning the place catalog for nearby places",
    buckets=BUCKETS_SEARCH,
    registry=REGISTRY,
)

NEARBY_SEARCH_RESULTS = Histogram(
    name=METRIC_NEARBY_RESULTS,
    documentation="Number of places returned by a nearby search",
    buckets=BUCKETS_RESULT_COUNT,
    registry=REGISTRY,
)

# =============================================================================
# Counter: 인증 시도
# =============================================================================

AUTH_ATTEMPTS = Counter(
    name=METRIC_AUTH_ATTEMPTS,
    documentation="Total number of register/login attempts",
    labelnames=["operation", "status"],  # operation: "register" | "login"
    registry=REGISTRY,
)


def observe_nearby_search(duration_seconds: float, result_count: int) -> None:
    """주변 검색 처리 시간 및 결과 개수 기록."""
    NEARBY_SEARCH_DURATION.observe(duration_seconds)
    NEARBY_SEARCH_RESULTS.observe(result_count)


def increment_auth_attempt(operation: str, success: bool) -> None:
    """인증 시도 카운터 증가.

    Args:
        operation: "register" 또는 "login"
        success: 성공 여부
    """
    status = STATUS_SUCCESS if success else STATUS_ERROR
    AUTH_ATTEMPTS.labels(operation=operation, status=status).inc()


router = APIRouter(tags=["metrics"])


@router.get(METRICS_PATH, include_in_schema=False)
async def metrics() -> Response:
    """Prometheus 메트릭 엔드포인트."""
    return Response(content=generate_latest(REGISTRY), media_type=CONTENT_TYPE_LATEST)
