"""
Runtime Settings (FastAPI Official Pattern)

환경변수 기반 동적 설정 - 배포 환경별로 변경됨
Reference: https://fastapi.tiangolo.com/advanced/settings/
"""

import json
import logging
import secrets
from datetime import timedelta
from functools import lru_cache
from typing import Annotated, List

from pydantic import AliasChoices, Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

from sportera.location.domain.constants import (
    DEFAULT_SEARCH_RADIUS_METERS,
    MAX_SEARCH_RADIUS_METERS,
)
from sportera.setup.constants import (
    DEFAULT_ACCESS_TOKEN_TTL_SECONDS,
    DEFAULT_BCRYPT_ROUNDS,
    DEFAULT_JWT_ALGORITHM,
)

logger = logging.getLogger(__name__)


def _ephemeral_secret() -> SecretStr:
    """서명 키 미설정 시 프로세스 전용 임의 키.

    재시작하면 기존 토큰은 모두 무효가 되고, 여러 워커 간 토큰이 호환되지 않습니다.
    """
    logger.warning(
        "JWT secret key is not configured, using a random per-process key",
        extra={"env": "SPORTERA_JWT_SECRET_KEY"},
    )
    return SecretStr(secrets.token_urlsafe(32))


class Settings(BaseSettings):
    """Runtime configuration for the SportEra API."""

    # ==========================================================================
    # 서비스 기본 정보
    # ==========================================================================

    app_name: str = "SportEra API"

    # ==========================================================================
    # 토큰 / 인증 설정
    # ==========================================================================

    jwt_secret_key: SecretStr = Field(
        default_factory=_ephemeral_secret,
        validation_alias=AliasChoices("SPORTERA_JWT_SECRET_KEY", "JWT_SECRET"),
        description="세션 토큰 서명 키 (프로세스 시작 시 1회 로드, 교체 시 기존 토큰 무효화)",
    )
    jwt_algorithm: str = Field(default=DEFAULT_JWT_ALGORITHM)
    access_token_ttl_seconds: int = Field(
        default=DEFAULT_ACCESS_TOKEN_TTL_SECONDS,
        gt=0,
        description="세션 토큰 유효 기간 (기본 7일)",
    )
    bcrypt_rounds: int = Field(
        default=DEFAULT_BCRYPT_ROUNDS,
        ge=4,
        le=31,
        description="비밀번호 해시 work factor",
    )

    # ==========================================================================
    # 주변 검색 정책
    # ==========================================================================

    max_search_radius_m: int = Field(default=MAX_SEARCH_RADIUS_METERS, gt=0)
    default_search_radius_m: int = Field(default=DEFAULT_SEARCH_RADIUS_METERS, gt=0)

    # ==========================================================================
    # 저장소 설정
    # ==========================================================================

    database_url: str | None = Field(
        default=None,
        description="SQLAlchemy async URL. 비어 있으면 in-memory 저장소를 사용",
    )
    seed_demo_places: bool = Field(
        default=True,
        description="in-memory 장소 저장소에 데모 장소를 적재",
    )

    # ==========================================================================
    # CORS 설정
    # ==========================================================================

    cors_origins: Annotated[List[str], NoDecode] = Field(
        default=["http://localhost:3001"],
        validation_alias=AliasChoices("SPORTERA_CORS_ORIGINS", "FRONTEND_URL"),
        description="허용된 CORS origins (콤마 구분 문자열 또는 JSON 배열)",
    )
    cors_allow_credentials: bool = True

    model_config = SettingsConfigDict(
        env_prefix="SPORTERA_",
        case_sensitive=False,
        extra="ignore",
        validate_default=True,
        populate_by_name=True,
    )

    @field_validator("jwt_secret_key")
    @classmethod
    def reject_blank_secret(cls, v: SecretStr) -> SecretStr:
        if not v.get_secret_value().strip():
            raise ValueError("jwt_secret_key must not be blank")
        return v

    @field_validator("cors_origins", mode="before")
    @classmethod
    def split_cors_origins(cls, v):
        """콤마 구분 문자열을 리스트로 변환."""
        if not isinstance(v, str):
            return v
        if v.lstrip().startswith("["):
            return json.loads(v)
        return [origin.strip() for origin in v.split(",") if origin.strip()]

    @property
    def access_token_ttl(self) -> timedelta:
        return timedelta(seconds=self.access_token_ttl_seconds)


@lru_cache
def get_settings() -> Settings:
    """Return cached Settings instance (FastAPI pattern)."""
    return Settings()
