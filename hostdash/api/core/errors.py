"""
Application Exception Hierarchy
Consistent exception handling across the application.
"""
from typing import Optional, Dict, Any, List, Sequence
from enum import Enum
from dataclasses import dataclass, field
from datetime import datetime, timezone
from fastapi import status
import traceback
import uuid


class ErrorCode(str, Enum):
    """Standardized error codes"""
    # General errors (1xxx)
    INTERNAL_ERROR = "ERR_1000"
    VALIDATION_ERROR = "ERR_1001"
    NOT_FOUND = "ERR_1002"

    # Authentication errors (2xxx)
    UNAUTHORIZED = "ERR_2000"
    INVALID_TOKEN = "ERR_2001"
    TOKEN_EXPIRED = "ERR_2002"

    # Authorization errors (3xxx)
    FORBIDDEN = "ERR_3000"

    # Resource errors (4xxx)
    ALERT_NOT_FOUND = "ERR_4010"

    # Dashboard errors (8xxx)
    INVALID_TIME_RANGE = "ERR_8000"
    DEMO_DATA_DISABLED = "ERR_8001"


@dataclass
class ErrorContext:
    """Additional context for errors"""
    request_id: str = field(default_factory=lambda: f"req_{uuid.uuid4().hex[:12]}")
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    path: Optional[str] = None
    user_id: Optional[str] = None


class AppError(Exception):
    """
    Base application exception.

    All custom exceptions should inherit from this class.
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.INTERNAL_ERROR,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        details: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None,
        context: Optional[ErrorContext] = None
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details or {}
        self.cause = cause
        self.context = context or ErrorContext()

        self._stack_trace = traceback.format_exc() if cause else None

    def to_dict(self, include_trace: bool = False) -> Dict[str, Any]:
        """Convert exception to dictionary for API response"""
        result = {
            "success": False,
            "error": {
                "code": self.code.value,
                "message": self.message,
                "details": self.details
            },
            "meta": {
                "request_id": self.context.request_id,
                "timestamp": self.context.timestamp.isoformat()
            }
        }

        if include_trace and self._stack_trace:
            result["error"]["trace"] = self._stack_trace

        return result

    def __str__(self) -> str:
        return f"[{self.code.value}] {self.message}"


# ==================== Authentication Errors ====================

class AuthenticationError(AppError):
    """Base authentication exception"""

    def __init__(
        self,
        message: str = "Authentication required",
        code: ErrorCode = ErrorCode.UNAUTHORIZED,
        **kwargs
    ):
        super().__init__(message, code, status_code=status.HTTP_401_UNAUTHORIZED, **kwargs)


class TokenExpiredError(AuthenticationError):
    """JWT token has expired"""

    def __init__(self, message: str = "Token has expired", **kwargs):
        super().__init__(message, ErrorCode.TOKEN_EXPIRED, **kwargs)


class InvalidTokenError(AuthenticationError):
    """Invalid JWT token"""

    def __init__(self, message: str = "Invalid token", **kwargs):
        super().__init__(message, ErrorCode.INVALID_TOKEN, **kwargs)


# ==================== Authorization Errors ====================

class AuthorizationError(AppError):
    """Base authorization exception"""

    def __init__(
        self,
        message: str = "Access denied",
        code: ErrorCode = ErrorCode.FORBIDDEN,
        **kwargs
    ):
        super().__init__(message, code, status_code=status.HTTP_403_FORBIDDEN, **kwargs)


class DemoDataDisabledError(AuthorizationError):
    """Demo seeding requested while disabled by configuration"""

    def __init__(self, message: str = "Demo data seeding is disabled", **kwargs):
        super().__init__(message, ErrorCode.DEMO_DATA_DISABLED, **kwargs)


# ==================== Resource Errors ====================

class NotFoundError(AppError):
    """Resource not found"""

    def __init__(
        self,
        resource_type: str,
        resource_id: Optional[str] = None,
        message: Optional[str] = None,
        code: ErrorCode = ErrorCode.NOT_FOUND,
        **kwargs
    ):
        if message is None:
            message = f"{resource_type} not found"
            if resource_id:
                message = f"{resource_type} '{resource_id}' not found"

        details = kwargs.pop("details", {})
        details["resource_type"] = resource_type
        if resource_id:
            details["resource_id"] = resource_id

        super().__init__(message, code, status_code=status.HTTP_404_NOT_FOUND, details=details, **kwargs)


class AlertNotFoundError(NotFoundError):
    """Alert not found (or not owned by the caller)"""

    def __init__(self, alert_id: Optional[str] = None, **kwargs):
        super().__init__("Alert", alert_id, code=ErrorCode.ALERT_NOT_FOUND, **kwargs)


# ==================== Validation Errors ====================

class ValidationError(AppError):
    """Validation error"""

    def __init__(
        self,
        message: str = "Validation error",
        errors: Optional[List[Dict[str, Any]]] = None,
        code: ErrorCode = ErrorCode.VALIDATION_ERROR,
        **kwargs
    ):
        details = kwargs.pop("details", {})
        if errors:
            details["validation_errors"] = errors

        super().__init__(
            message, code, status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, details=details, **kwargs
        )


class InvalidTimeRangeError(ValidationError, ValueError):
    """
    Unknown reporting range token.

    Raised for caller programming errors only; it is the one error class the
    aggregation engine lets propagate.
    """

    def __init__(self, value: Any, allowed: Sequence[str] = (), **kwargs):
        self.value = value
        super().__init__(
            f"Unsupported time range: {value!r}",
            code=ErrorCode.INVALID_TIME_RANGE,
            details={"value": str(value), "allowed": list(allowed)},
            **kwargs
        )
