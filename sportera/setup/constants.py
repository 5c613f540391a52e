"""
Service Constants (Single Source of Truth)

정적 상수 정의 - 빌드 타임에 결정되며 환경변수로 변경되지 않음
"""

from __future__ import annotations

# =============================================================================
# Service Identity
# =============================================================================

SERVICE_NAME = "sportera-api"
SERVICE_VERSION = "1.0.0"

API_PREFIX = "/api/v1"

# =============================================================================
# Logging Constants (12-Factor App Compliance)
# =============================================================================

ENV_KEY_ENVIRONMENT = "ENVIRONMENT"
ENV_KEY_LOG_LEVEL = "LOG_LEVEL"
ENV_KEY_LOG_FORMAT = "LOG_FORMAT"

DEFAULT_ENVIRONMENT = "dev"
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_LOG_FORMAT = "json"

ECS_VERSION = "8.11.0"

# 로그 레코드에서 제외할 기본 속성
EXCLUDED_LOG_RECORD_ATTRS = frozenset(
    {
        "name",
        "msg",
        "args",
        "created",
        "filename",
        "funcName",
        "levelname",
        "levelno",
        "lineno",
        "module",
        "msecs",
        "pathname",
        "process",
        "processName",
        "relativeCreated",
        "stack_info",
        "exc_info",
        "exc_text",
        "thread",
        "threadName",
        "taskName",
        "message",
    }
)

# 노이즈가 많은 로거 목록 (레벨 조정 대상)
NOISY_LOGGERS = (
    "uvicorn",
    "uvicorn.access",
    "uvicorn.error",
    "httpx",
    "httpcore",
    "asyncio",
    "aiosqlite",
    "sqlalchemy.engine",
)

# =============================================================================
# PII Masking Configuration (OWASP compliant)
# =============================================================================

SENSITIVE_FIELD_PATTERNS = frozenset(
    {"password", "secret", "token", "api_key", "authorization", "hash"}
)
MASK_PLACEHOLDER = "***REDACTED***"
MASK_PRESERVE_PREFIX = 4
MASK_PRESERVE_SUFFIX = 4
MASK_MIN_LENGTH = 10

# extra 키 → ECS 필드 (나머지 extra는 labels로)
ECS_FIELD_MAP: dict[str, str] = {
    "account_id": "user.id",
    "place_id": "sportera.place.id",
    "owner_id": "sportera.place.owner_id",
    "store_backend": "sportera.store.backend",
    "jti": "sportera.token.jti",
    "reason": "event.reason",
    "path": "url.path",
}

# =============================================================================
# Auth Defaults
# =============================================================================

DEFAULT_ACCESS_TOKEN_TTL_SECONDS = 7 * 24 * 60 * 60
DEFAULT_BCRYPT_ROUNDS = 12
DEFAULT_JWT_ALGORITHM = "HS256"

# =============================================================================
# Metrics Constants
# =============================================================================

METRICS_PATH = "/metrics"

METRIC_NEARBY_DURATION = "sportera_nearby_search_duration_seconds"
METRIC_NEARBY_RESULTS = "sportera_nearby_search_results"
METRIC_AUTH_ATTEMPTS = "sportera_auth_attempts_total"

# 메트릭 상태 레이블
STATUS_SUCCESS = "success"
STATUS_ERROR = "error"

# 주변 검색 처리 시간 (1ms ~ 2.5s)
BUCKETS_SEARCH: tuple[float, ...] = (0.001, 0.005, 0.01, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5)

# 주변 검색 결과 개수
BUCKETS_RESULT_COUNT: tuple[float, ...] = (0, 1, 5, 10, 25, 50, 100, 250, 500)
