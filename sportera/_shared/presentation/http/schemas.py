"""Common HTTP Schemas."""

from __future__ import annotations

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Health Check 응답."""

    status: str = Field(default="healthy", description="서비스 상태")
    service: str = Field(..., description="서비스 이름")
    version: str = Field(..., description="API 버전")


class ErrorResponse(BaseModel):
    """에러 응답 envelope."""

    success: bool = False
    kind: str = Field(..., description="에러 종류 (ValidationFailure, NotFound, ...)")
    message: str = Field(..., description="에러 메시지")
    field: str | None = Field(None, description="검증 실패 필드")
