"""Exception Handlers.

도메인/애플리케이션 예외를 HTTP 응답으로 변환합니다.
응답 형식: {"error": {"code": ..., "message": ...}}
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from apps.member.application.common.exceptions import ApplicationError
from apps.member.domain.exceptions.base import DomainError
from apps.member.presentation.http.errors.translators import translate_error

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "Internal server error"


def error_response(status_code: int, code: str, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"error": {"code": code, "message": message}},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """예외 핸들러 등록."""

    async def known_error_handler(request: Request, exc: DomainError | ApplicationError):
        status_code, code = translate_error(exc)
        extra = {"path": request.url.path, "code": code, "error": exc.message}
        if status_code >= 500:
            logger.error("Request failed", extra=extra, exc_info=exc)
            # 500 응답에는 내부 사유를 노출하지 않음
            return error_response(status_code, code, INTERNAL_ERROR_MESSAGE)
        logger.warning("Request rejected", extra=extra)
        return error_response(status_code, code, exc.message)

    app.add_exception_handler(DomainError, known_error_handler)
    app.add_exception_handler(ApplicationError, known_error_handler)

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        logger.warning(
            "Request validation failed",
            extra={"path": request.url.path, "errors": str(exc.errors())},
        )
        return error_response(422, "VALIDATION_ERROR", "Invalid request")

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        code = "UNAUTHORIZED" if exc.status_code == 401 else "HTTP_ERROR"
        return error_response(exc.status_code, code, str(exc.detail))

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.exception("Unhandled error", extra={"path": request.url.path})
        return error_response(500, "INTERNAL_SERVER_ERROR", INTERNAL_ERROR_MESSAGE)
