"""
Base In-Memory Repository Implementation
"""
from typing import TypeVar, Generic, Optional, List, Dict, Any
import asyncio

from ...core.temporal import normalize_timestamp
from ...repositories.base import BaseRepository, Entity, EntityId, utc_now


T = TypeVar('T', bound=Entity)


class MemoryBaseRepository(BaseRepository[T], Generic[T]):
    """
    Base in-memory repository implementation.
    Writes are serialized with an asyncio lock.
    """

    id_prefix = "mem"

    def __init__(self):
        self._storage: Dict[str, T] = {}
        self._lock = asyncio.Lock()
        self._id_counter = 0

    def _generate_id(self) -> str:
        """Generate a unique ID"""
        self._id_counter += 1
        return f"{self.id_prefix}_{self._id_counter:08d}"

    def _normalize_id(self, entity_id: EntityId) -> str:
        return str(entity_id)

    def _matches_filters(self, entity: T, filters: Dict[str, Any]) -> bool:
        for key, value in filters.items():
            if getattr(entity, key, None) != value:
                return False
        return True

    @staticmethod
    def _newest_first(entities: List[T]) -> List[T]:
        return sorted(entities, key=lambda e: normalize_timestamp(e.created_at), reverse=True)

    async def create(self, entity: T) -> T:
        """Create a new entity, keeping a caller-supplied created_at"""
        async with self._lock:
            if not entity.id:
                entity.id = self._generate_id()
            if entity.created_at is None:
                entity.created_at = utc_now()

            self._storage[self._normalize_id(entity.id)] = entity
            return entity

    async def get_by_id(self, entity_id: EntityId) -> Optional[T]:
        return self._storage.get(self._normalize_id(entity_id))

    async def get_all(
        self,
        skip: int = 0,
        limit: int = 100,
        filters: Optional[Dict[str, Any]] = None
    ) -> List[T]:
        entities = list(self._storage.values())

        if filters:
            entities = [e for e in entities if self._matches_filters(e, filters)]

        return self._newest_first(entities)[skip:skip + limit]

    async def update(self, entity_id: EntityId, data: Dict[str, Any]) -> Optional[T]:
        async with self._lock:
            entity = self._storage.get(self._normalize_id(entity_id))
            if not entity:
                return None

            for key, value in data.items():
                if hasattr(entity, key):
                    setattr(entity, key, value)
            return entity

    async def delete(self, entity_id: EntityId) -> bool:
        async with self._lock:
            entity_id = self._normalize_id(entity_id)
            if entity_id in self._storage:
                del self._storage[entity_id]
                return True
            return False

    async def count(self, filters: Optional[Dict[str, Any]] = None) -> int:
        if not filters:
            return len(self._storage)

        return len([e for e in self._storage.values() if self._matches_filters(e, filters)])

    async def clear(self) -> None:
        """Clear all data (for testing)"""
        async with self._lock:
            self._storage.clear()
            self._id_counter = 0
