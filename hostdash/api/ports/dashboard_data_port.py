"""
Dashboard Data Port
Read interface of the data collaborator that backs the dashboard.
"""
from abc import ABC, abstractmethod
from typing import List, Optional

from ..repositories.order_repository import OrderEntity
from ..repositories.service_repository import ServiceEntity
from ..repositories.alert_repository import AlertEntity
from ..repositories.profile_repository import ProfileEntity


class DashboardDataPort(ABC):
    """
    Four independent read channels keyed by user identity.

    Implementations may be slow or fail; callers are expected to isolate
    each channel. No ordering guarantee is made on returned collections.
    """

    @abstractmethod
    async def get_orders(self, user_id: str) -> List[OrderEntity]:
        """Orders placed by the user"""
        pass

    @abstractmethod
    async def get_services(self, user_id: str) -> List[ServiceEntity]:
        """Services provisioned for the user"""
        pass

    @abstractmethod
    async def get_alerts(self, user_id: str, limit: int) -> List[AlertEntity]:
        """Up to ``limit`` alerts addressed to the user"""
        pass

    @abstractmethod
    async def get_profile(self, user_id: str) -> Optional[ProfileEntity]:
        """The user's profile, or None if none is stored"""
        pass
