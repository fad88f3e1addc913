"""
In-Memory Order Repository Implementation
"""
from typing import List

from .base import MemoryBaseRepository
from ...repositories.order_repository import OrderRepository, OrderEntity


class MemoryOrderRepository(MemoryBaseRepository[OrderEntity], OrderRepository):
    """In-memory order repository implementation"""

    id_prefix = "ord"

    async def get_by_user(self, user_id: str) -> List[OrderEntity]:
        orders = [o for o in self._storage.values() if o.user_id == user_id]
        return self._newest_first(orders)
