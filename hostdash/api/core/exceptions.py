"""
Exception Handlers
Translate AppError, HTTPException and validation failures into the
standard error envelope.
"""
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from datetime import datetime, timezone
import uuid

from .app_mode import get_app_mode_manager
from .errors import AppError, ErrorCode
from .logging_framework import LogCategory, get_logger

logger = get_logger("hostdash.errors")


def _request_id(request: Request) -> str:
    return getattr(request.state, "request_id", None) or f"req_{uuid.uuid4().hex[:12]}"


def _error_body(request: Request, code: str, message: str, details=None) -> dict:
    return {
        "success": False,
        "error": {
            "code": code,
            "message": message,
            "details": details
        },
        "meta": {
            "request_id": _request_id(request),
            "timestamp": datetime.now(timezone.utc).isoformat()
        }
    }


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    """Handle application exceptions"""
    exc.context.request_id = _request_id(request)
    exc.context.path = str(request.url.path)

    if exc.status_code >= 500:
        logger.error(str(exc), category=LogCategory.ERROR, extra_data=exc.details)
    else:
        logger.warning(str(exc), category=LogCategory.ERROR, extra_data=exc.details)

    include_trace = get_app_mode_manager().should_expose_internal_errors()
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict(include_trace=include_trace))


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Handle HTTP exceptions raised by FastAPI or routers"""
    detail = exc.detail
    if isinstance(detail, dict):
        code = detail.get("code", f"HTTP_{exc.status_code}")
        message = detail.get("message", "")
    else:
        code = f"HTTP_{exc.status_code}"
        message = str(detail)

    return JSONResponse(
        status_code=exc.status_code,
        content=_error_body(request, code, message),
        headers=getattr(exc, "headers", None)
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Handle validation errors"""
    errors = []
    for error in exc.errors():
        field = ".".join(str(loc) for loc in error["loc"])
        errors.append({
            "field": field,
            "message": error["msg"],
            "type": error["type"]
        })

    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content=_error_body(
            request,
            ErrorCode.VALIDATION_ERROR.value,
            "Request validation failed",
            {"errors": errors}
        )
    )


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle unexpected exceptions"""
    logger.error(
        f"Unhandled error on {request.method} {request.url.path}: {exc}",
        category=LogCategory.ERROR,
        exc_info=True
    )
    message = "Internal server error"
    if get_app_mode_manager().should_expose_internal_errors():
        message = f"{type(exc).__name__}: {exc}"

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=_error_body(request, ErrorCode.INTERNAL_ERROR.value, message)
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Attach all handlers to the application"""
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)
