"""
Logging Middleware for FastAPI
Request/Response logging with mode-aware behavior
"""
import time
import uuid
from typing import Callable
from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

from .app_mode import get_app_mode_manager
from .logging_framework import AppLogger, RequestContext, LogCategory, get_logger


class LoggingMiddleware(BaseHTTPMiddleware):
    """
    Middleware for request/response logging.
    Binds a RequestContext so every log line of the request carries its id.
    """

    SKIP_PATHS = {
        "/api/v1/health",
        "/favicon.ico",
        "/docs",
        "/redoc",
        "/openapi.json"
    }

    def __init__(self, app: ASGIApp):
        super().__init__(app)
        self._logger = get_logger("hostdash.http")
        self._mode_manager = get_app_mode_manager()

    async def dispatch(
        self,
        request: Request,
        call_next: Callable[[Request], Response]
    ) -> Response:
        if request.url.path in self.SKIP_PATHS:
            return await call_next(request)

        request_id = request.headers.get(
            "X-Request-ID",
            f"req_{uuid.uuid4().hex[:12]}"
        )

        context = RequestContext(
            request_id=request_id,
            endpoint=str(request.url.path),
            method=request.method,
            ip_address=self._get_client_ip(request),
            user_agent=request.headers.get("User-Agent", "")[:200]
        )
        AppLogger.set_request_context(context)
        request.state.request_id = request_id

        if self._mode_manager.is_develop:
            self._logger.debug(
                f"-> {request.method} {request.url.path}",
                category=LogCategory.REQUEST,
                extra_data={"query_params": dict(request.query_params)}
            )

        start_time = time.time()

        try:
            response = await call_next(request)

            duration_ms = (time.time() - start_time) * 1000
            response.headers["X-Request-ID"] = request_id
            response.headers["X-Process-Time-Ms"] = str(int(duration_ms))

            self._logger.log_request(
                method=request.method,
                path=str(request.url.path),
                status_code=response.status_code,
                duration_ms=duration_ms
            )
            return response

        except Exception as e:
            duration_ms = (time.time() - start_time) * 1000
            self._logger.error(
                f"Request failed: {request.method} {request.url.path}",
                category=LogCategory.REQUEST,
                extra_data={"duration_ms": int(duration_ms), "error": str(e)},
                exc_info=True
            )
            raise

        finally:
            AppLogger.clear_request_context()

    def _get_client_ip(self, request: Request) -> str:
        """Extract client IP from request"""
        forwarded = request.headers.get("X-Forwarded-For")
        if forwarded:
            return forwarded.split(",")[0].strip()

        real_ip = request.headers.get("X-Real-IP")
        if real_ip:
            return real_ip

        if request.client:
            return request.client.host

        return "unknown"


def setup_logging_middleware(app):
    """Configure logging middleware for the application"""
    app.add_middleware(LoggingMiddleware)
