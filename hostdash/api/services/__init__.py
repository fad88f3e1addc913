"""
Dashboard services
"""
from .time_window import RANGE_DAYS, parse_time_range, window_start
from .dashboard_aggregator import aggregate, is_expiring, orders_in_window
from .fetch_coordinator import (
    ChannelResult,
    DashboardFetchCoordinator,
    DashboardSnapshot,
    default_profile,
)
from .dashboard_service import DashboardResult, DashboardService, get_dashboard_service
from .alert_service import AlertService, get_alert_service
from .demo_data_service import DemoDataService, SeedSummary, get_demo_data_service

__all__ = [
    "RANGE_DAYS",
    "parse_time_range",
    "window_start",
    "aggregate",
    "is_expiring",
    "orders_in_window",
    "ChannelResult",
    "DashboardFetchCoordinator",
    "DashboardSnapshot",
    "default_profile",
    "DashboardResult",
    "DashboardService",
    "get_dashboard_service",
    "AlertService",
    "get_alert_service",
    "DemoDataService",
    "SeedSummary",
    "get_demo_data_service",
]
