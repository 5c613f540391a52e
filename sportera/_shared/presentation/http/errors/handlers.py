"""FastAPI Exception Handlers."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from sportera._shared.exceptions import ErrorKind, SporteraError
from sportera._shared.presentation.http.errors.translators import translate_error
from sportera._shared.presentation.http.schemas import ErrorResponse

logger = logging.getLogger(__name__)


def _respond(status_code: int, body: ErrorResponse, headers: dict | None = None) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=body.model_dump(exclude_none=True),
        headers=headers,
    )


async def handle_sportera_error(request: Request, exc: SporteraError) -> JSONResponse:
    status_code, body = translate_error(exc)
    if exc.kind is ErrorKind.DEPENDENCY_FAILURE:
        logger.error(
            "Dependency failure",
            extra={"path": request.url.path, "error": type(exc).__name__},
        )
    headers = None
    if status_code == status.HTTP_401_UNAUTHORIZED:
        headers = {"WWW-Authenticate": "Bearer"}
    return _respond(status_code, body, headers)


async def handle_request_validation_error(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """요청 파싱 실패(쿼리/바디 타입 오류)도 ValidationFailure envelope로 응답."""
    errors = exc.errors()
    first = errors[0] if errors else {}
    location = [str(part) for part in first.get("loc", ()) if part not in ("query", "body")]
    field = location[-1] if location else None
    reason = first.get("msg", "invalid value")
    message = f"Validation error for '{field}': {reason}" if field else reason
    return _respond(
        status.HTTP_400_BAD_REQUEST,
        ErrorResponse(kind=ErrorKind.VALIDATION_FAILURE.value, message=message, field=field),
    )


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error", extra={"path": request.url.path})
    return _respond(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        ErrorResponse(kind="InternalError", message="Internal server error"),
    )


def register_exception_handlers(app: FastAPI) -> None:
    """앱에 예외 핸들러 등록."""
    app.add_exception_handler(SporteraError, handle_sportera_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)
    app.add_exception_handler(Exception, handle_unexpected_error)
