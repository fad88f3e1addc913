"""
Dashboard Fetch Coordinator
Fan-out/fan-in retrieval of the four dashboard channels with:
- One task per channel, all started together
- Per-channel timeout
- Partial result collection on failure
"""
from dataclasses import dataclass, field
from functools import partial
from typing import Any, Awaitable, Callable, Dict, List, Optional
import asyncio
import time

from ..core.logging_framework import LogCategory, get_logger
from ..models.dashboard import ChannelName, ChannelReport, ChannelStatus
from ..models.identity import CurrentUser
from ..ports.dashboard_data_port import DashboardDataPort
from ..repositories.order_repository import OrderEntity
from ..repositories.service_repository import ServiceEntity
from ..repositories.alert_repository import AlertEntity
from ..repositories.profile_repository import NotificationPreferences, ProfileEntity

logger = get_logger("hostdash.fetch")

DEFAULT_FETCH_TIMEOUT = 10.0
DEFAULT_ALERT_LIMIT = 50


@dataclass
class ChannelResult:
    """Outcome of one channel, captured independently of the others"""
    channel: ChannelName
    status: ChannelStatus
    value: Any = None
    error: Optional[str] = None
    duration_ms: float = 0.0

    @property
    def ok(self) -> bool:
        return self.status == ChannelStatus.OK

    def to_report(self) -> ChannelReport:
        return ChannelReport(
            channel=self.channel,
            status=self.status,
            error=self.error,
            duration_ms=round(self.duration_ms, 1)
        )


@dataclass
class DashboardSnapshot:
    """Merged channel data; failed list channels are empty, profile is never None"""
    orders: List[OrderEntity]
    services: List[ServiceEntity]
    alerts: List[AlertEntity]
    profile: ProfileEntity
    channels: Dict[ChannelName, ChannelResult] = field(default_factory=dict)

    @property
    def degraded_channels(self) -> List[ChannelName]:
        return [
            name for name, result in self.channels.items()
            if result.status == ChannelStatus.FAILED
        ]


def default_profile(user: CurrentUser) -> ProfileEntity:
    """Profile used when the profile channel fails or has no record"""
    return ProfileEntity(
        id=user.id,
        display_name=user.display_name or "User",
        email=user.email or "",
        preferences=NotificationPreferences(
            email_notifications=True,
            sms_notifications=True,
            marketing_emails=False,
            maintenance_alerts=True
        )
    )


class DashboardFetchCoordinator:
    """
    Retrieves orders, services, alerts and profile concurrently.

    A failing or slow channel never affects the others: each outcome is
    tagged separately and the caller always receives a complete snapshot.
    """

    def __init__(
        self,
        data_port: DashboardDataPort,
        timeout_seconds: float = DEFAULT_FETCH_TIMEOUT,
        alert_limit: int = DEFAULT_ALERT_LIMIT
    ):
        self.data_port = data_port
        self.timeout_seconds = timeout_seconds
        self.alert_limit = alert_limit

    async def fetch_all(self, user: CurrentUser) -> DashboardSnapshot:
        """
        Fetch every channel for ``user``.

        Does not raise for channel failures. Cancelling the caller cancels
        all four channel tasks.
        """
        calls = {
            ChannelName.ORDERS: partial(self.data_port.get_orders, user.id),
            ChannelName.SERVICES: partial(self.data_port.get_services, user.id),
            ChannelName.ALERTS: partial(self.data_port.get_alerts, user.id, self.alert_limit),
            ChannelName.PROFILE: partial(self.data_port.get_profile, user.id),
        }

        settled = await asyncio.gather(
            *(self._settle(name, call) for name, call in calls.items()),
            return_exceptions=True
        )

        channels: Dict[ChannelName, ChannelResult] = {}
        for name, result in zip(calls.keys(), settled):
            if isinstance(result, BaseException):
                # Child task cancelled on its own (not by our caller)
                result = self._failed(name, result, 0.0)
            channels[name] = result

        profile = channels[ChannelName.PROFILE]
        snapshot = DashboardSnapshot(
            orders=self._list_value(channels[ChannelName.ORDERS]),
            services=self._list_value(channels[ChannelName.SERVICES]),
            alerts=self._list_value(channels[ChannelName.ALERTS]),
            profile=profile.value if profile.ok else default_profile(user),
            channels=channels
        )

        if snapshot.degraded_channels:
            logger.warning(
                f"Dashboard fetch degraded for user {user.id}",
                category=LogCategory.EXTERNAL_API,
                extra_data={"degraded": [c.value for c in snapshot.degraded_channels]}
            )
        return snapshot

    async def _settle(
        self,
        channel: ChannelName,
        call: Callable[[], Awaitable[Any]]
    ) -> ChannelResult:
        start = time.perf_counter()
        try:
            value = await asyncio.wait_for(call(), timeout=self.timeout_seconds)
        except asyncio.TimeoutError:
            return self._failed(
                channel,
                TimeoutError(f"timed out after {self.timeout_seconds}s"),
                self._elapsed(start)
            )
        except Exception as e:
            return self._failed(channel, e, self._elapsed(start))

        duration_ms = self._elapsed(start)
        if value is None and channel == ChannelName.PROFILE:
            return ChannelResult(channel, ChannelStatus.MISSING, duration_ms=duration_ms)
        return ChannelResult(channel, ChannelStatus.OK, value=value, duration_ms=duration_ms)

    def _failed(self, channel: ChannelName, error: BaseException, duration_ms: float) -> ChannelResult:
        message = f"{type(error).__name__}: {error}"
        logger.warning(
            f"Channel {channel.value} failed: {message}",
            category=LogCategory.EXTERNAL_API,
            duration_ms=duration_ms,
            extra_data={"channel": channel.value}
        )
        return ChannelResult(channel, ChannelStatus.FAILED, error=message, duration_ms=duration_ms)

    @staticmethod
    def _list_value(result: ChannelResult) -> list:
        if not result.ok or result.value is None:
            return []
        return list(result.value)

    @staticmethod
    def _elapsed(start: float) -> float:
        return (time.perf_counter() - start) * 1000
