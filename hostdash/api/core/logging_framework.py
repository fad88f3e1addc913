"""
Centralized Logging Framework
Mode-aware logging with request context and performance tracking
"""
import sys
import json
import time
import random
import asyncio
import logging
import traceback
from contextvars import ContextVar
from typing import Optional, Dict, Any, Callable
from datetime import datetime, timezone
from dataclasses import dataclass, field
from functools import wraps
from enum import Enum

from .app_mode import get_app_mode_manager


class LogCategory(str, Enum):
    """Log categories for filtering and routing"""
    REQUEST = "request"
    DATABASE = "database"
    EXTERNAL_API = "external_api"
    PERFORMANCE = "performance"
    BUSINESS = "business"
    AGGREGATION = "aggregation"
    ERROR = "error"


@dataclass
class RequestContext:
    """Context information for a request"""
    request_id: str
    user_id: Optional[str] = None
    endpoint: Optional[str] = None
    method: Optional[str] = None
    ip_address: Optional[str] = None
    user_agent: Optional[str] = None
    start_time: float = field(default_factory=time.time)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "request_id": self.request_id,
            "user_id": self.user_id,
            "endpoint": self.endpoint,
            "method": self.method,
            "ip_address": self.ip_address,
            "elapsed_ms": int((time.time() - self.start_time) * 1000)
        }


_request_context: ContextVar[Optional[RequestContext]] = ContextVar(
    "hostdash_request_context", default=None
)


class StructuredFormatter(logging.Formatter):
    """JSON structured log formatter for production"""

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno
        }

        if hasattr(record, "request_id"):
            log_data["request_id"] = record.request_id
        if hasattr(record, "user_id"):
            log_data["user_id"] = record.user_id
        if hasattr(record, "category"):
            log_data["category"] = record.category
        if hasattr(record, "duration_ms"):
            log_data["duration_ms"] = record.duration_ms
        if hasattr(record, "extra_data"):
            log_data["data"] = record.extra_data

        if record.exc_info:
            exc_type, exc_value = record.exc_info[0], record.exc_info[1]
            log_data["exception"] = {
                "type": exc_type.__name__ if exc_type else None,
                "message": str(exc_value) if exc_value else None
            }
            if get_app_mode_manager().should_log_stack_trace():
                log_data["exception"]["traceback"] = traceback.format_exception(*record.exc_info)

        return json.dumps(log_data, ensure_ascii=False, default=str)


class DevelopFormatter(logging.Formatter):
    """Human-readable formatter for development"""

    COLORS = {
        "DEBUG": "\033[36m",     # Cyan
        "INFO": "\033[32m",      # Green
        "WARNING": "\033[33m",   # Yellow
        "ERROR": "\033[31m",     # Red
        "CRITICAL": "\033[35m",  # Magenta
        "RESET": "\033[0m"
    }

    def format(self, record: logging.LogRecord) -> str:
        color = self.COLORS.get(record.levelname, self.COLORS["RESET"])
        reset = self.COLORS["RESET"]

        timestamp = datetime.now().strftime("%H:%M:%S.%f")[:-3]
        base = f"{color}[{timestamp}] {record.levelname:8}{reset} {record.name}: {record.getMessage()}"

        context_parts = []
        if getattr(record, "request_id", None):
            context_parts.append(f"req={record.request_id[:12]}")
        if getattr(record, "user_id", None):
            context_parts.append(f"user={record.user_id}")
        if hasattr(record, "duration_ms"):
            context_parts.append(f"took={record.duration_ms}ms")

        if context_parts:
            base = f"{base} [{', '.join(context_parts)}]"

        if getattr(record, "extra_data", None):
            base = f"{base}\n    {color}->{reset} {json.dumps(record.extra_data, ensure_ascii=False, default=str)}"

        if record.exc_info:
            exc_text = "".join(traceback.format_exception(*record.exc_info))
            base = f"{base}\n{color}{exc_text}{reset}"

        return base


class AppLogger:
    """
    Central application logger with mode-aware behavior.
    Provides consistent logging interface across the application.
    """

    _loggers: Dict[str, logging.Logger] = {}

    def __init__(self, name: str = "hostdash"):
        self.name = name
        self._logger = self._get_or_create_logger(name)
        self._mode_manager = get_app_mode_manager()

    @classmethod
    def _get_or_create_logger(cls, name: str) -> logging.Logger:
        """Get or create a logger with proper configuration"""
        if name in cls._loggers:
            return cls._loggers[name]

        logger = logging.getLogger(name)
        mode_manager = get_app_mode_manager()

        level = getattr(logging, mode_manager.get_log_level())
        logger.setLevel(level)
        logger.handlers = []

        handler = logging.StreamHandler(sys.stdout)
        handler.setLevel(level)

        if mode_manager.is_develop:
            handler.setFormatter(DevelopFormatter())
        else:
            handler.setFormatter(StructuredFormatter())

        logger.addHandler(handler)
        logger.propagate = False

        cls._loggers[name] = logger
        return logger

    @staticmethod
    def set_request_context(context: RequestContext):
        """Bind request context to the current task"""
        _request_context.set(context)

    @staticmethod
    def get_request_context() -> Optional[RequestContext]:
        return _request_context.get()

    @staticmethod
    def clear_request_context():
        _request_context.set(None)

    def _should_sample_log(self) -> bool:
        rate = self._mode_manager.config.log_sampling_rate
        if rate >= 1.0:
            return True
        return random.random() < rate

    def _add_context_to_record(
        self,
        category: Optional[LogCategory] = None,
        duration_ms: Optional[float] = None,
        extra_data: Optional[Dict[str, Any]] = None
    ) -> Dict[str, Any]:
        """Add context information to log record"""
        ctx = self.get_request_context()

        result: Dict[str, Any] = {}
        if ctx:
            result["request_id"] = ctx.request_id
            result["user_id"] = ctx.user_id

        if category:
            result["category"] = category.value
        if duration_ms is not None:
            result["duration_ms"] = round(duration_ms, 1)
        if extra_data:
            result["extra_data"] = extra_data

        return result

    def debug(
        self,
        message: str,
        category: Optional[LogCategory] = None,
        extra_data: Optional[Dict[str, Any]] = None,
        **kwargs
    ):
        """Log debug message (develop mode only)"""
        if not self._mode_manager.config.enable_debug_logs:
            return

        extra = self._add_context_to_record(category, extra_data=extra_data)
        self._logger.debug(message, extra=extra, **kwargs)

    def info(
        self,
        message: str,
        category: Optional[LogCategory] = None,
        duration_ms: Optional[float] = None,
        extra_data: Optional[Dict[str, Any]] = None,
        **kwargs
    ):
        if not self._should_sample_log():
            return

        extra = self._add_context_to_record(category, duration_ms, extra_data)
        self._logger.info(message, extra=extra, **kwargs)

    def warning(
        self,
        message: str,
        category: Optional[LogCategory] = None,
        duration_ms: Optional[float] = None,
        extra_data: Optional[Dict[str, Any]] = None,
        **kwargs
    ):
        extra = self._add_context_to_record(category, duration_ms, extra_data)
        self._logger.warning(message, extra=extra, **kwargs)

    def error(
        self,
        message: str,
        category: Optional[LogCategory] = None,
        extra_data: Optional[Dict[str, Any]] = None,
        exc_info: bool = False,
        **kwargs
    ):
        extra = self._add_context_to_record(category or LogCategory.ERROR, extra_data=extra_data)

        # Auto-include exception info in develop mode
        if self._mode_manager.is_develop and sys.exc_info()[0] is not None:
            exc_info = True

        self._logger.error(message, extra=extra, exc_info=exc_info, **kwargs)

    def log_request(
        self,
        method: str,
        path: str,
        status_code: int,
        duration_ms: float,
        extra_data: Optional[Dict[str, Any]] = None
    ):
        """Log HTTP request"""
        message = f"{method} {path} -> {status_code}"

        level = logging.INFO
        if status_code >= 500:
            level = logging.ERROR
        elif status_code >= 400:
            level = logging.WARNING

        extra = self._add_context_to_record(
            LogCategory.REQUEST,
            duration_ms,
            {
                "method": method,
                "path": path,
                "status_code": status_code,
                **(extra_data or {})
            }
        )

        self._logger.log(level, message, extra=extra)

    def log_performance(
        self,
        operation: str,
        duration_ms: float,
        success: bool = True,
        extra_data: Optional[Dict[str, Any]] = None
    ):
        """Log performance metrics"""
        if not self._mode_manager.config.enable_performance_tracking:
            return

        threshold = self._mode_manager.config.slow_request_threshold_ms
        is_slow = duration_ms > threshold

        message = f"Performance: {operation}"
        if is_slow:
            message = f"SLOW {message}"

        level = logging.WARNING if is_slow else logging.DEBUG
        if not success:
            level = logging.ERROR

        extra = self._add_context_to_record(
            LogCategory.PERFORMANCE,
            duration_ms,
            {"operation": operation, "success": success, "slow": is_slow, **(extra_data or {})}
        )

        self._logger.log(level, message, extra=extra)


def log_execution(
    operation: Optional[str] = None,
    category: LogCategory = LogCategory.BUSINESS
):
    """
    Decorator to log coroutine execution with timing.

    Usage:
        @log_execution("dashboard.compute", category=LogCategory.AGGREGATION)
        async def compute(...):
            ...
    """
    def decorator(func: Callable):
        op_name = operation or f"{func.__module__}.{func.__name__}"

        if not asyncio.iscoroutinefunction(func):
            raise TypeError(f"log_execution expects a coroutine function, got {op_name}")

        @wraps(func)
        async def wrapper(*args, **kwargs):
            logger = get_logger("hostdash.execution")
            start = time.perf_counter()
            try:
                result = await func(*args, **kwargs)
            except Exception as e:
                duration = (time.perf_counter() - start) * 1000
                logger.log_performance(op_name, duration, success=False)
                # Caller errors (AppError below 500) are not failures of the operation
                if getattr(e, "status_code", 500) < 500:
                    logger.warning(f"Rejected {op_name}: {e}", category=category)
                else:
                    logger.error(f"Error in {op_name}: {e}", category=category, exc_info=True)
                raise
            duration = (time.perf_counter() - start) * 1000
            logger.log_performance(op_name, duration, success=True)
            return result

        return wrapper

    return decorator


def get_logger(name: str = "hostdash") -> AppLogger:
    """Get application logger"""
    return AppLogger(name)
