"""
SportEra 구조화 로깅 (ECS)

- account_id, place_id, store_backend 등 도메인 식별자는 ECS 필드로 승격
- 그 밖의 extra는 labels에 담음
- password, token 등 민감 필드는 마스킹
"""

import json
import logging
import os
import sys
from datetime import datetime, timezone
from typing import Any

from sportera.setup.constants import (
    DEFAULT_ENVIRONMENT,
    DEFAULT_LOG_FORMAT,
    DEFAULT_LOG_LEVEL,
    ECS_FIELD_MAP,
    ECS_VERSION,
    ENV_KEY_ENVIRONMENT,
    ENV_KEY_LOG_FORMAT,
    ENV_KEY_LOG_LEVEL,
    EXCLUDED_LOG_RECORD_ATTRS,
    MASK_MIN_LENGTH,
    MASK_PLACEHOLDER,
    MASK_PRESERVE_PREFIX,
    MASK_PRESERVE_SUFFIX,
    NOISY_LOGGERS,
    SENSITIVE_FIELD_PATTERNS,
    SERVICE_NAME,
    SERVICE_VERSION,
)

# =============================================================================
# 마스킹
# =============================================================================


def _redact(key: str, value: Any) -> Any:
    if any(pattern in key.lower() for pattern in SENSITIVE_FIELD_PATTERNS):
        text = "" if value is None else str(value)
        if len(text) <= MASK_MIN_LENGTH:
            return MASK_PLACEHOLDER
        # 긴 값(해시, Bearer 헤더)은 앞뒤만 노출
        return f"{text[:MASK_PRESERVE_PREFIX]}...{text[-MASK_PRESERVE_SUFFIX:]}"
    if isinstance(value, dict):
        return {k: _redact(k, v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_redact("", item) for item in value]
    return value


def mask_sensitive_data(data: dict[str, Any]) -> dict[str, Any]:
    """민감 필드를 재귀적으로 마스킹한 사본 반환."""
    if not isinstance(data, dict):
        return data
    return _redact("", data)


def _record_extras(record: logging.LogRecord) -> dict[str, Any]:
    """logger 호출 시 extra=로 전달된 필드만 추출 (마스킹 적용)."""
    extras = {
        key: value
        for key, value in record.__dict__.items()
        if key not in EXCLUDED_LOG_RECORD_ATTRS
    }
    return mask_sensitive_data(extras)


# =============================================================================
# 포매터
# =============================================================================


class ECSJsonFormatter(logging.Formatter):
    """ECS JSON 한 줄 포매터.

    ECS_FIELD_MAP에 있는 extra 키는 최상위 ECS 필드가 됩니다.
    예: extra={"account_id": ...} → "user.id"
    """

    def __init__(
        self,
        service_name: str = SERVICE_NAME,
        service_version: str = SERVICE_VERSION,
        environment: str = DEFAULT_ENVIRONMENT,
    ):
        super().__init__()
        self.service = {
            "service.name": service_name,
            "service.version": service_version,
            "service.environment": environment,
        }

    def format(self, record: logging.LogRecord) -> str:
        timestamp = datetime.fromtimestamp(record.created, tz=timezone.utc)
        document: dict[str, Any] = {
            "@timestamp": timestamp.isoformat(timespec="milliseconds"),
            "log.level": record.levelname.lower(),
            "log.logger": record.name,
            "message": record.getMessage(),
            "ecs.version": ECS_VERSION,
            **self.service,
        }

        extras = _record_extras(record)
        for key, field in ECS_FIELD_MAP.items():
            if key in extras:
                document[field] = extras.pop(key)
        if extras:
            document["labels"] = extras

        if record.exc_info and record.exc_info[0] is not None:
            document["error.type"] = record.exc_info[0].__name__
            document["error.message"] = str(record.exc_info[1])
            document["error.stack_trace"] = self.formatException(record.exc_info)

        return json.dumps(document, ensure_ascii=False, default=str)


class KeyValueFormatter(logging.Formatter):
    """로컬 개발용 텍스트 포매터. 도메인 식별자를 key=value로 덧붙입니다."""

    def __init__(self) -> None:
        super().__init__(
            "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        pairs = [
            f"{key}={record.__dict__[key]}" for key in ECS_FIELD_MAP if key in record.__dict__
        ]
        return f"{line} | {' '.join(pairs)}" if pairs else line


# =============================================================================
# 설정
# =============================================================================


def configure_logging(
    service_name: str = SERVICE_NAME,
    service_version: str = SERVICE_VERSION,
    log_level: str | None = None,
    json_format: bool | None = None,
) -> None:
    """루트 로거에 stdout 핸들러 하나를 설치.

    인자가 없으면 LOG_LEVEL, LOG_FORMAT, ENVIRONMENT 환경변수를 따릅니다.
    """
    level_name = (log_level or os.getenv(ENV_KEY_LOG_LEVEL, DEFAULT_LOG_LEVEL)).upper()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        level = logging.INFO
    if json_format is None:
        json_format = os.getenv(ENV_KEY_LOG_FORMAT, DEFAULT_LOG_FORMAT) == "json"

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    if json_format:
        handler.setFormatter(
            ECSJsonFormatter(
                service_name=service_name,
                service_version=service_version,
                environment=os.getenv(ENV_KEY_ENVIRONMENT, DEFAULT_ENVIRONMENT),
            )
        )
    else:
        handler.setFormatter(KeyValueFormatter())

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
