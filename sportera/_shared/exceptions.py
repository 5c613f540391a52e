"""Shared Error Taxonomy.

모든 도메인/애플리케이션 예외의 공통 분류(kind)를 정의합니다.
프레젠테이션 계층은 kind만 보고 응답 형식을 결정합니다.
"""

from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    """외부로 노출되는 에러 종류."""

    VALIDATION_FAILURE = "ValidationFailure"
    NOT_FOUND = "NotFound"
    CONFLICT = "Conflict"
    AUTH_FAILURE = "AuthFailure"
    TOKEN_REJECTED = "TokenRejected"
    FORBIDDEN = "Forbidden"
    DEPENDENCY_FAILURE = "DependencyFailure"


class SporteraError(Exception):
    """SportEra 예외 베이스 클래스."""

    kind: ErrorKind = ErrorKind.DEPENDENCY_FAILURE

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)
