"""Error → HTTP 응답 변환."""

from __future__ import annotations

from fastapi import status

from sportera._shared.exceptions import ErrorKind, SporteraError
from sportera._shared.presentation.http.schemas import ErrorResponse

STATUS_BY_KIND: dict[ErrorKind, int] = {
    ErrorKind.VALIDATION_FAILURE: status.HTTP_400_BAD_REQUEST,
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.CONFLICT: status.HTTP_409_CONFLICT,
    ErrorKind.AUTH_FAILURE: status.HTTP_401_UNAUTHORIZED,
    ErrorKind.TOKEN_REJECTED: status.HTTP_401_UNAUTHORIZED,
    ErrorKind.FORBIDDEN: status.HTTP_403_FORBIDDEN,
    ErrorKind.DEPENDENCY_FAILURE: status.HTTP_503_SERVICE_UNAVAILABLE,
}


def translate_error(error: SporteraError) -> tuple[int, ErrorResponse]:
    """예외의 kind에 따라 상태 코드와 응답 본문 결정."""
    kind = error.kind
    message = error.message
    if kind is ErrorKind.DEPENDENCY_FAILURE:
        # 내부 원인(드라이버 예외 이름 등)은 노출하지 않음
        message = "Service temporarily unavailable"
    return STATUS_BY_KIND[kind], ErrorResponse(
        kind=kind.value,
        message=message,
        field=getattr(error, "field", None),
    )
