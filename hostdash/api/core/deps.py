"""
Dependency Injection for FastAPI

Identity comes from a bearer JWT issued by the identity provider. The
dashboard trusts its claims and makes no role decisions of its own.
"""
from typing import Optional
from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from jose import ExpiredSignatureError, JWTError, jwt

from .config import api_settings
from .errors import AuthenticationError, InvalidTokenError, TokenExpiredError
from .logging_framework import AppLogger
from ..models.identity import CurrentUser

security = HTTPBearer(auto_error=False)


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security)
) -> CurrentUser:
    """
    Validate the bearer token and return the caller.

    Raises:
        AuthenticationError: no token supplied
        TokenExpiredError: token past its ``exp``
        InvalidTokenError: bad signature, malformed token or missing ``sub``
    """
    if credentials is None or not credentials.credentials:
        raise AuthenticationError()

    try:
        payload = jwt.decode(
            credentials.credentials,
            api_settings.JWT_SECRET_KEY,
            algorithms=[api_settings.JWT_ALGORITHM]
        )
    except ExpiredSignatureError:
        raise TokenExpiredError()
    except JWTError as e:
        raise InvalidTokenError(cause=e)

    user_id = payload.get("sub")
    if not user_id:
        raise InvalidTokenError("Token has no subject")

    ctx = AppLogger.get_request_context()
    if ctx is not None:
        ctx.user_id = str(user_id)

    return CurrentUser(
        id=str(user_id),
        email=payload.get("email"),
        display_name=payload.get("name"),
        role=payload.get("role", "client")
    )


# Service Dependencies
from ..services.dashboard_service import DashboardService, get_dashboard_service as _get_dashboard_service
from ..services.alert_service import AlertService, get_alert_service as _get_alert_service
from ..services.demo_data_service import DemoDataService, get_demo_data_service as _get_demo_data_service


def get_dashboard_service() -> DashboardService:
    return _get_dashboard_service()


def get_alert_service() -> AlertService:
    return _get_alert_service()


def get_demo_data_service() -> DemoDataService:
    return _get_demo_data_service()
