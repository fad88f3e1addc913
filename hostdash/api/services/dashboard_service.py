"""
Dashboard Service
Entry point of the aggregation engine: validate the range, fetch every
channel, derive the statistics.
"""
from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional, Union

from ..core.config import api_settings
from ..core.logging_framework import LogCategory, get_logger, log_execution
from ..core.temporal import as_utc
from ..models.dashboard import ChannelName, ChannelStatus, DashboardStats, TimeRange
from ..models.identity import CurrentUser
from ..ports.dashboard_data_port import DashboardDataPort
from ..repositories.order_repository import OrderEntity
from ..repositories.service_repository import ServiceEntity
from ..repositories.alert_repository import AlertEntity
from ..repositories.profile_repository import ProfileEntity
from .dashboard_aggregator import aggregate
from .fetch_coordinator import ChannelResult, DashboardFetchCoordinator
from .time_window import parse_time_range, window_start

logger = get_logger("hostdash.dashboard")


@dataclass
class DashboardResult:
    """Statistics plus the records and channel flags they were derived from"""
    stats: DashboardStats
    orders: List[OrderEntity]
    services: List[ServiceEntity]
    alerts: List[AlertEntity]
    profile: ProfileEntity
    time_range: TimeRange
    window_start: datetime
    generated_at: datetime
    channels: List[ChannelResult] = field(default_factory=list)

    @property
    def degraded_channels(self) -> List[ChannelName]:
        return [c.channel for c in self.channels if c.status == ChannelStatus.FAILED]


class DashboardService:
    """Computes the dashboard for one caller at one instant"""

    def __init__(
        self,
        data_port: DashboardDataPort,
        timeout_seconds: Optional[float] = None,
        alert_limit: Optional[int] = None
    ):
        self.coordinator = DashboardFetchCoordinator(
            data_port,
            timeout_seconds=timeout_seconds or api_settings.DASHBOARD_FETCH_TIMEOUT_SECONDS,
            alert_limit=alert_limit or api_settings.DASHBOARD_ALERT_LIMIT
        )

    @log_execution("dashboard.compute", category=LogCategory.AGGREGATION)
    async def compute_dashboard_stats(
        self,
        user: CurrentUser,
        time_range: Union[TimeRange, str],
        now: datetime
    ) -> DashboardResult:
        """
        Fetch and aggregate the dashboard.

        Raises:
            InvalidTimeRangeError: before any channel is contacted
        """
        selected = parse_time_range(time_range)
        now = as_utc(now)

        snapshot = await self.coordinator.fetch_all(user)
        stats = aggregate(snapshot.orders, snapshot.services, snapshot.alerts, selected, now)

        logger.info(
            f"Dashboard computed for user {user.id}",
            category=LogCategory.AGGREGATION,
            extra_data={
                "range": selected.value,
                "orders": len(snapshot.orders),
                "services": len(snapshot.services),
                "alerts": len(snapshot.alerts),
                "degraded": [c.value for c in snapshot.degraded_channels]
            }
        )

        return DashboardResult(
            stats=stats,
            orders=snapshot.orders,
            services=snapshot.services,
            alerts=snapshot.alerts,
            profile=snapshot.profile,
            time_range=selected,
            window_start=window_start(selected, now),
            generated_at=now,
            channels=list(snapshot.channels.values())
        )


# Singleton instance
_dashboard_service: Optional[DashboardService] = None


def get_dashboard_service() -> DashboardService:
    """Get or create dashboard service instance"""
    global _dashboard_service
    if _dashboard_service is None:
        from ..core.container import get_container
        _dashboard_service = DashboardService(get_container().dashboard_data)
    return _dashboard_service


def reset_dashboard_service() -> None:
    """Drop the cached instance (for testing)"""
    global _dashboard_service
    _dashboard_service = None
