# 전역 예외 핸들러
# - BlogAPIError            → {"error": {code, message}} + 예외에 지정된 상태 코드
# - RequestValidationError  → 400 + 필드별 상세 정보
# - 그 밖의 모든 예외         → 500, 내부 정보는 응답에 노출하지 않음

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from ..core.exceptions import BlogAPIError, InternalFailureError, UnauthenticatedError

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    _register_domain_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_domain_error_handler(app: FastAPI) -> None:

    @app.exception_handler(BlogAPIError)
    async def domain_error_handler(request: Request, exc: BlogAPIError):
        if isinstance(exc, InternalFailureError):
            # 원인 예외는 서비스 레이어에서 이미 traceback 과 함께 기록됨
            logger.error(f"InternalFailure on {request.url.path}: {exc.__cause__!r}")
        else:
            logger.info(f"{exc.code} on {request.method} {request.url.path}")
        headers = {"WWW-Authenticate": "Bearer"} if isinstance(exc, UnauthenticatedError) else None
        return JSONResponse(status_code=exc.status_code, content=exc.to_response(), headers=headers)


def _register_validation_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        logger.warning(f"Validation error on {request.url.path}: {exc.errors()}")
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=_build_validation_error_response(exc),
        )


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        # 상세 내용은 서버 로그에만 남깁니다
        logger.error(f"Unhandled exception on {request.url.path}: {exc}", exc_info=True)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=InternalFailureError().to_response(),
        )


def _build_validation_error_response(exc: RequestValidationError) -> dict:
    return {
        "error": {
            "code": "VALIDATION_ERROR",
            "message": "Invalid request data",
            "details": [
                {
                    "field": ".".join(str(loc) for loc in e["loc"]),
                    "message": e["msg"],
                    "type": e["type"],
                }
                for e in exc.errors()
            ],
        },
    }
