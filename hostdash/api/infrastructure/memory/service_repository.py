"""
In-Memory Service Repository Implementation
"""
from typing import List

from .base import MemoryBaseRepository
from ...repositories.service_repository import ServiceRepository, ServiceEntity


class MemoryServiceRepository(MemoryBaseRepository[ServiceEntity], ServiceRepository):
    """In-memory provisioned service repository implementation"""

    id_prefix = "svc"

    async def get_by_user(self, user_id: str) -> List[ServiceEntity]:
        services = [s for s in self._storage.values() if s.user_id == user_id]
        return self._newest_first(services)
