"""
Dashboard API Router
Customer dashboard: statistics, records, alert inbox and demo data
"""
import uuid
from datetime import datetime, timezone
from typing import List
from fastapi import APIRouter, Depends, Query

from ..models.base import SuccessResponse, MetaInfo
from ..models.dashboard import (
    TimeRange,
    DashboardResponse,
    OrderView,
    ServiceView,
    AlertView,
    ProfileView,
    TimeRangeOption,
    AlertReadResponse,
    DemoSeedResponse,
)
from ..models.identity import CurrentUser
from ..core.config import api_settings
from ..core.deps import (
    get_current_user,
    get_dashboard_service,
    get_alert_service,
    get_demo_data_service,
)
from ..core.errors import DemoDataDisabledError
from ..services.time_window import RANGE_DAYS

router = APIRouter(prefix="/dashboard", tags=["Dashboard"])


@router.get(
    "",
    response_model=SuccessResponse[DashboardResponse],
    summary="Dashboard overview",
    description="Statistics for the selected range plus the records they were derived from."
)
async def get_dashboard(
    time_range: str = Query(default=TimeRange.LAST_30_DAYS.value, alias="range", description="7d, 30d, 90d or 1y"),
    current_user: CurrentUser = Depends(get_current_user),
    dashboard_service = Depends(get_dashboard_service)
):
    """Compute the caller's dashboard"""
    request_id = f"req_{uuid.uuid4().hex[:12]}"

    result = await dashboard_service.compute_dashboard_stats(
        current_user,
        time_range,
        datetime.now(timezone.utc)
    )

    return SuccessResponse(
        data=DashboardResponse(
            range=result.time_range,
            generated_at=result.generated_at,
            window_start=result.window_start,
            stats=result.stats,
            orders=[OrderView.from_entity(o) for o in result.orders],
            services=[ServiceView.from_entity(s) for s in result.services],
            alerts=[AlertView.from_entity(a) for a in result.alerts],
            profile=ProfileView.from_entity(result.profile),
            channels=[c.to_report() for c in result.channels],
            degraded_channels=result.degraded_channels
        ),
        meta=MetaInfo(request_id=request_id)
    )


@router.get(
    "/ranges",
    response_model=SuccessResponse[List[TimeRangeOption]],
    summary="Supported reporting ranges"
)
async def list_ranges():
    request_id = f"req_{uuid.uuid4().hex[:12]}"

    return SuccessResponse(
        data=[TimeRangeOption(value=r, days=RANGE_DAYS[r]) for r in TimeRange],
        meta=MetaInfo(request_id=request_id)
    )


@router.post(
    "/alerts/{alert_id}/read",
    response_model=SuccessResponse[AlertReadResponse],
    summary="Mark alert as read"
)
async def mark_alert_read(
    alert_id: str,
    current_user: CurrentUser = Depends(get_current_user),
    alert_service = Depends(get_alert_service)
):
    """Mark one of the caller's alerts as read; repeated calls are no-ops"""
    request_id = f"req_{uuid.uuid4().hex[:12]}"

    alert = await alert_service.mark_as_read(current_user.id, alert_id)

    return SuccessResponse(
        data=AlertReadResponse(alert=AlertView.from_entity(alert)),
        meta=MetaInfo(request_id=request_id)
    )


@router.post(
    "/demo",
    response_model=SuccessResponse[DemoSeedResponse],
    summary="Seed demo dashboard data",
    description="Adds sample orders, services and alerts for the caller. Disabled in production."
)
async def seed_demo_data(
    current_user: CurrentUser = Depends(get_current_user),
    demo_service = Depends(get_demo_data_service)
):
    request_id = f"req_{uuid.uuid4().hex[:12]}"

    if not api_settings.demo_data_enabled:
        raise DemoDataDisabledError()

    summary = await demo_service.seed(current_user, datetime.now(timezone.utc))

    return SuccessResponse(
        data=DemoSeedResponse(
            orders=summary.orders,
            services=summary.services,
            alerts=summary.alerts,
            profile_created=summary.profile_created
        ),
        meta=MetaInfo(request_id=request_id)
    )
