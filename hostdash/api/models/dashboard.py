"""
Dashboard models
Reporting ranges, derived statistics and the dashboard API payloads
"""
from datetime import datetime
from enum import Enum
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field

from ..core.temporal import normalize_timestamp
from ..repositories.order_repository import OrderEntity
from ..repositories.service_repository import ServiceEntity
from ..repositories.alert_repository import AlertEntity
from ..repositories.profile_repository import ProfileEntity


class TimeRange(str, Enum):
    """Selectable reporting window"""
    LAST_7_DAYS = "7d"
    LAST_30_DAYS = "30d"
    LAST_90_DAYS = "90d"
    LAST_YEAR = "1y"


class ChannelName(str, Enum):
    """Independent dashboard data channels"""
    ORDERS = "orders"
    SERVICES = "services"
    ALERTS = "alerts"
    PROFILE = "profile"


class ChannelStatus(str, Enum):
    """Outcome of one channel fetch"""
    OK = "ok"
    FAILED = "failed"
    # Channel answered but had nothing (profile only)
    MISSING = "missing"


class DashboardStats(BaseModel):
    """Summary figures derived on every dashboard request"""
    total_orders: int = Field(0, ge=0, description="Orders in the selected window")
    total_spent: float = Field(0.0, description="Sum of order totals in the window")
    active_services: int = Field(0, ge=0, description="Services currently active")
    expiring_services: int = Field(0, ge=0, description="Services expiring within 30 days")
    unread_alerts: int = Field(0, ge=0, description="Unread alerts")
    monthly_spend: float = Field(0.0, description="Same figure as total_spent for the window")
    avg_order_value: float = Field(0.0, description="total_spent / total_orders, 0 when empty")
    success_rate: float = Field(100.0, ge=0, le=100, description="Completed orders in percent")

    model_config = ConfigDict(json_schema_extra={
        "example": {
            "total_orders": 2,
            "total_spent": 30.0,
            "active_services": 1,
            "expiring_services": 1,
            "unread_alerts": 3,
            "monthly_spend": 30.0,
            "avg_order_value": 15.0,
            "success_rate": 50.0
        }
    })


class ChannelReport(BaseModel):
    """Per-channel fetch status exposed to the presentation layer"""
    channel: ChannelName
    status: ChannelStatus
    error: Optional[str] = None
    duration_ms: float = 0.0


# ==================== Record views ====================

class OrderItemView(BaseModel):
    name: str
    price: float
    quantity: int = 1


class OrderView(BaseModel):
    """Order with its timestamp normalized"""
    id: str
    order_number: Optional[str] = None
    items: List[OrderItemView] = Field(default_factory=list)
    total_amount: float = 0.0
    status: str
    currency: str = "USD"
    payment_method: Optional[str] = None
    created_at: datetime

    @classmethod
    def from_entity(cls, entity: OrderEntity) -> "OrderView":
        return cls(
            id=str(entity.id),
            order_number=entity.order_number,
            items=[
                OrderItemView(name=i.name, price=i.price, quantity=i.quantity)
                for i in entity.items
            ],
            total_amount=entity.total_amount or 0.0,
            status=str(getattr(entity.status, "value", entity.status)),
            currency=entity.currency,
            payment_method=entity.payment_method,
            created_at=normalize_timestamp(entity.created_at)
        )


class ServiceSpecsView(BaseModel):
    cpu: Optional[str] = None
    ram: Optional[str] = None
    storage: Optional[str] = None
    bandwidth: Optional[str] = None


class ServiceView(BaseModel):
    """Provisioned service with timestamps normalized"""
    id: str
    name: str
    type: str
    status: str
    price: float
    renewal_price: Optional[float] = None
    expiry_date: Optional[datetime] = None
    specs: Optional[ServiceSpecsView] = None
    features: List[str] = Field(default_factory=list)
    uptime: Optional[float] = None
    created_at: datetime
    last_activity: Optional[datetime] = None

    @classmethod
    def from_entity(cls, entity: ServiceEntity) -> "ServiceView":
        specs = None
        if entity.specs is not None:
            specs = ServiceSpecsView(**entity.specs.to_dict())
        return cls(
            id=str(entity.id),
            name=entity.name,
            type=str(getattr(entity.type, "value", entity.type)),
            status=str(getattr(entity.status, "value", entity.status)),
            price=entity.price,
            renewal_price=entity.renewal_price,
            expiry_date=None if entity.expiry_date is None else normalize_timestamp(entity.expiry_date),
            specs=specs,
            features=list(entity.features),
            uptime=entity.uptime,
            created_at=normalize_timestamp(entity.created_at),
            last_activity=None if entity.last_activity is None else normalize_timestamp(entity.last_activity)
        )


class AlertView(BaseModel):
    """Alert with its timestamp normalized"""
    id: str
    title: str
    message: str
    type: str
    priority: str
    read: bool
    read_at: Optional[datetime] = None
    action_url: Optional[str] = None
    action_text: Optional[str] = None
    created_at: datetime

    @classmethod
    def from_entity(cls, entity: AlertEntity) -> "AlertView":
        return cls(
            id=str(entity.id),
            title=entity.title,
            message=entity.message,
            type=str(getattr(entity.type, "value", entity.type)),
            priority=str(getattr(entity.priority, "value", entity.priority)),
            read=entity.read,
            read_at=entity.read_at,
            action_url=entity.action_url,
            action_text=entity.action_text,
            created_at=normalize_timestamp(entity.created_at)
        )


class PreferencesView(BaseModel):
    email_notifications: bool
    sms_notifications: bool
    marketing_emails: bool
    maintenance_alerts: bool


class ProfileView(BaseModel):
    display_name: str
    email: str
    phone: Optional[str] = None
    company: Optional[str] = None
    avatar: Optional[str] = None
    preferences: PreferencesView

    @classmethod
    def from_entity(cls, entity: ProfileEntity) -> "ProfileView":
        return cls(
            display_name=entity.display_name,
            email=entity.email,
            phone=entity.phone,
            company=entity.company,
            avatar=entity.avatar,
            preferences=PreferencesView(**entity.preferences.to_dict())
        )


# ==================== API payloads ====================

class DashboardResponse(BaseModel):
    """Everything the dashboard page renders"""
    range: TimeRange
    generated_at: datetime
    window_start: datetime
    stats: DashboardStats
    orders: List[OrderView] = Field(default_factory=list)
    services: List[ServiceView] = Field(default_factory=list)
    alerts: List[AlertView] = Field(default_factory=list)
    profile: ProfileView
    channels: List[ChannelReport] = Field(default_factory=list)
    degraded_channels: List[ChannelName] = Field(
        default_factory=list,
        description="Channels whose data could not be loaded"
    )


class TimeRangeOption(BaseModel):
    value: TimeRange
    days: int


class AlertReadResponse(BaseModel):
    alert: AlertView


class DemoSeedResponse(BaseModel):
    orders: int
    services: int
    alerts: int
    profile_created: bool
