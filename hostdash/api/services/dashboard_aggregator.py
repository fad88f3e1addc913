"""
Dashboard statistics aggregation

Pure functions over already-fetched records. Orders are an event stream and
are filtered to the reporting window; services and alerts are a
point-in-time inventory and are counted whole.
"""
from datetime import datetime, timedelta
from typing import Iterable, List, Sequence, Union

from ..core.temporal import as_utc, normalize_timestamp
from ..models.dashboard import DashboardStats, TimeRange
from ..repositories.order_repository import OrderEntity, OrderStatus
from ..repositories.service_repository import ServiceEntity, ServiceStatus
from ..repositories.alert_repository import AlertEntity
from .time_window import window_start

EXPIRY_HORIZON = timedelta(days=30)


def orders_in_window(orders: Iterable[OrderEntity], start: datetime) -> List[OrderEntity]:
    """Orders created at or after ``start``; undated orders count as very old"""
    return [o for o in orders if normalize_timestamp(o.created_at) >= start]


def is_expiring(service: ServiceEntity, now: datetime) -> bool:
    """True when the expiry falls in (now, now + 30 days]"""
    if service.expiry_date is None:
        return False
    expiry = normalize_timestamp(service.expiry_date)
    return now < expiry <= now + EXPIRY_HORIZON


def aggregate(
    orders: Sequence[OrderEntity],
    services: Sequence[ServiceEntity],
    alerts: Sequence[AlertEntity],
    time_range: Union[TimeRange, str],
    now: datetime
) -> DashboardStats:
    """Derive the dashboard figures for one reporting window"""
    now = as_utc(now)
    start = window_start(time_range, now)
    recent = orders_in_window(orders, start)

    total_orders = len(recent)
    total_spent = sum((o.total_amount or 0) for o in recent)
    completed = sum(1 for o in recent if o.status == OrderStatus.COMPLETED)

    if total_orders > 0:
        avg_order_value = total_spent / total_orders
        success_rate = completed / total_orders * 100
    else:
        # An empty window reports a perfect success rate
        avg_order_value = 0.0
        success_rate = 100.0

    return DashboardStats(
        total_orders=total_orders,
        total_spent=total_spent,
        active_services=sum(1 for s in services if s.status == ServiceStatus.ACTIVE),
        expiring_services=sum(1 for s in services if is_expiring(s, now)),
        unread_alerts=sum(1 for a in alerts if a.read is False),
        # TODO: confirm with product whether this should be a fixed 30-day figure
        monthly_spend=total_spent,
        avg_order_value=avg_order_value,
        success_rate=success_rate,
    )
