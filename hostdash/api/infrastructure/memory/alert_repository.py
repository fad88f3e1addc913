"""
In-Memory Alert Repository Implementation
"""
from typing import List, Optional

from .base import MemoryBaseRepository
from ...repositories.alert_repository import AlertRepository, AlertEntity
from ...repositories.base import utc_now


class MemoryAlertRepository(MemoryBaseRepository[AlertEntity], AlertRepository):
    """In-memory alert repository implementation"""

    id_prefix = "alr"

    async def get_by_user(self, user_id: str, limit: int = 20) -> List[AlertEntity]:
        alerts = [a for a in self._storage.values() if a.user_id == user_id]
        # limit applies after sorting so the newest alerts survive
        return self._newest_first(alerts)[:limit]

    async def mark_as_read(self, alert_id: str) -> Optional[AlertEntity]:
        async with self._lock:
            alert = self._storage.get(self._normalize_id(alert_id))
            if alert is None:
                return None
            if not alert.read:
                alert.read = True
                alert.read_at = utc_now()
            return alert
