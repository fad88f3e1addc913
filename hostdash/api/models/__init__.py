"""Pydantic models for request/response schemas"""

from .base import (
    MetaInfo,
    ErrorDetail,
    SuccessResponse,
    ErrorResponse,
)

from .dashboard import (
    TimeRange,
    ChannelName,
    ChannelStatus,
    ChannelReport,
    DashboardStats,
    OrderView,
    ServiceView,
    AlertView,
    ProfileView,
    DashboardResponse,
    TimeRangeOption,
    AlertReadResponse,
    DemoSeedResponse,
)

from .health import HealthStatus, HealthResponse
from .identity import CurrentUser

__all__ = [
    "MetaInfo",
    "ErrorDetail",
    "SuccessResponse",
    "ErrorResponse",
    "TimeRange",
    "ChannelName",
    "ChannelStatus",
    "ChannelReport",
    "DashboardStats",
    "OrderView",
    "ServiceView",
    "AlertView",
    "ProfileView",
    "DashboardResponse",
    "TimeRangeOption",
    "AlertReadResponse",
    "DemoSeedResponse",
    "HealthStatus",
    "HealthResponse",
    "CurrentUser",
]
