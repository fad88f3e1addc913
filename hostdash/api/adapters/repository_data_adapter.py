"""
Repository-backed Dashboard Data Adapter
Serves the dashboard read channels from the repository layer.
"""
from typing import List, Optional

from ..ports.dashboard_data_port import DashboardDataPort
from ..repositories.order_repository import OrderRepository, OrderEntity
from ..repositories.service_repository import ServiceRepository, ServiceEntity
from ..repositories.alert_repository import AlertRepository, AlertEntity
from ..repositories.profile_repository import ProfileRepository, ProfileEntity


class RepositoryDashboardDataAdapter(DashboardDataPort):
    """DashboardDataPort over the order/service/alert/profile repositories"""

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

    async def get_orders(self, user_id: str) -> List[OrderEntity]:
        return await self.orders.get_by_user(user_id)

    async def get_services(self, user_id: str) -> List[ServiceEntity]:
        return await self.services.get_by_user(user_id)

    async def get_alerts(self, user_id: str, limit: int) -> List[AlertEntity]:
        return await self.alerts.get_by_user(user_id, limit=limit)

    async def get_profile(self, user_id: str) -> Optional[ProfileEntity]:
        return await self.profiles.get_by_id(user_id)
