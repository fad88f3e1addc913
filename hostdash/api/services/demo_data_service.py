"""
Demo Data Service
Seeds a caller's dashboard with a representative set of records.
"""
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Optional
import asyncio

from ..core.logging_framework import LogCategory, get_logger
from ..core.temporal import as_utc
from ..models.identity import CurrentUser
from ..repositories.order_repository import OrderEntity, OrderItem, OrderRepository, OrderStatus
from ..repositories.service_repository import (
    ServiceEntity,
    ServiceRepository,
    ServiceSpecs,
    ServiceStatus,
    ServiceType,
)
from ..repositories.alert_repository import AlertEntity, AlertPriority, AlertRepository, AlertType
from ..repositories.profile_repository import (
    NotificationPreferences,
    ProfileEntity,
    ProfileRepository,
)

logger = get_logger("hostdash.demo")


@dataclass
class SeedSummary:
    orders: int
    services: int
    alerts: int
    profile_created: bool


class DemoDataService:
    """Writes demo orders, services, alerts and a profile for one user"""

    def __init__(
        self,
        orders: OrderRepository,
        services: ServiceRepository,
        alerts: AlertRepository,
        profiles: ProfileRepository
    ):
        self.orders = orders
        self.services = services
        self.alerts = alerts
        self.profiles = profiles

    async def seed(self, user: CurrentUser, now: datetime) -> SeedSummary:
        """Insert the demo set; all timestamps are relative to ``now``"""
        now = as_utc(now)
        orders = self._demo_orders(user.id, now)
        services = self._demo_services(user.id, now)
        alerts = self._demo_alerts(user.id, now)

        await asyncio.gather(
            *(self.orders.create(o) for o in orders),
            *(self.services.create(s) for s in services),
            *(self.alerts.create(a) for a in alerts)
        )

        profile = ProfileEntity(
            id=user.id,
            created_at=now,
            display_name=user.display_name or "Demo User",
            email=user.email or "demo@example.com",
            preferences=NotificationPreferences(
                email_notifications=True,
                sms_notifications=False,
                marketing_emails=False,
                maintenance_alerts=True
            )
        )
        stored = await self.profiles.create_if_absent(profile)
        profile_created = stored is profile

        logger.info(
            f"Demo dashboard data seeded for user {user.id}",
            category=LogCategory.BUSINESS,
            extra_data={"profile_created": profile_created}
        )
        return SeedSummary(
            orders=len(orders),
            services=len(services),
            alerts=len(alerts),
            profile_created=profile_created
        )

    @staticmethod
    def _demo_orders(user_id: str, now: datetime):
        return [
            OrderEntity(
                id="",
                user_id=user_id,
                order_number="ORD-001",
                items=[
                    OrderItem("VPS Hosting - Premium", 29.99),
                    OrderItem("Domain Registration", 12.99),
                ],
                total_amount=42.98,
                status=OrderStatus.COMPLETED,
                created_at=now - timedelta(days=7)
            ),
            OrderEntity(
                id="",
                user_id=user_id,
                order_number="ORD-002",
                items=[OrderItem("Web Development", 499.99)],
                total_amount=499.99,
                status=OrderStatus.PROCESSING,
                created_at=now - timedelta(days=3)
            ),
            OrderEntity(
                id="",
                user_id=user_id,
                order_number="ORD-003",
                items=[OrderItem("Discord Bot Development", 149.99)],
                total_amount=149.99,
                status=OrderStatus.PENDING,
                created_at=now - timedelta(days=1)
            ),
        ]

    @staticmethod
    def _demo_services(user_id: str, now: datetime):
        return [
            ServiceEntity(
                id="",
                user_id=user_id,
                name="VPS Server - Premium",
                type=ServiceType.VPS,
                status=ServiceStatus.ACTIVE,
                price=29.99,
                expiry_date=now + timedelta(days=25),
                specs=ServiceSpecs(cpu="4 Cores", ram="8GB", storage="200GB SSD", bandwidth="10TB"),
                created_at=now - timedelta(days=5)
            ),
            ServiceEntity(
                id="",
                user_id=user_id,
                name="example-hosting.com",
                type=ServiceType.DOMAIN,
                status=ServiceStatus.ACTIVE,
                price=12.99,
                expiry_date=now + timedelta(days=340),
                features=["DNS Management", "WHOIS Privacy", "Email Forwarding"],
                created_at=now - timedelta(days=25)
            ),
            ServiceEntity(
                id="",
                user_id=user_id,
                name="Minecraft Server - Basic",
                type=ServiceType.MINECRAFT,
                status=ServiceStatus.PENDING,
                price=19.99,
                expiry_date=now + timedelta(days=30),
                features=["4GB RAM", "20 Player Slots", "Plugin Support"],
                created_at=now - timedelta(days=1)
            ),
        ]

    @staticmethod
    def _demo_alerts(user_id: str, now: datetime):
        return [
            AlertEntity(
                id="",
                user_id=user_id,
                title="VPS Server Expiring Soon",
                message="Your VPS server will expire in 25 days. Please renew to avoid service interruption.",
                type=AlertType.RENEWAL,
                priority=AlertPriority.HIGH,
                action_url="/dashboard/services",
                action_text="Renew now",
                created_at=now - timedelta(hours=1)
            ),
            AlertEntity(
                id="",
                user_id=user_id,
                title="Web Development Project Update",
                message="Your web development project is 60% complete. Expected completion in 5 days.",
                type=AlertType.INFO,
                created_at=now - timedelta(hours=2)
            ),
            AlertEntity(
                id="",
                user_id=user_id,
                title="New Feature Available",
                message="Real-time dashboard monitoring is now available.",
                type=AlertType.SUCCESS,
                priority=AlertPriority.LOW,
                read=True,
                read_at=now - timedelta(hours=3),
                created_at=now - timedelta(hours=4)
            ),
            AlertEntity(
                id="",
                user_id=user_id,
                title="Payment Confirmed",
                message="Payment of $42.98 has been confirmed for Order #ORD-001.",
                type=AlertType.SUCCESS,
                priority=AlertPriority.LOW,
                read=True,
                read_at=now - timedelta(days=6),
                created_at=now - timedelta(days=7)
            ),
        ]


# Singleton instance
_demo_data_service: Optional[DemoDataService] = None


def get_demo_data_service() -> DemoDataService:
    """Get or create demo data service instance"""
    global _demo_data_service
    if _demo_data_service is None:
        from ..core.container import get_container
        container = get_container()
        _demo_data_service = DemoDataService(
            container.order_repository,
            container.service_repository,
            container.alert_repository,
            container.profile_repository
        )
    return _demo_data_service


def reset_demo_data_service() -> None:
    """Drop the cached instance (for testing)"""
    global _demo_data_service
    _demo_data_service = None
