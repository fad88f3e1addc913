"""
Base Repository Interface
Generic repository pattern for data access abstraction.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass, field, fields
from datetime import datetime, timezone
from enum import Enum
from typing import TypeVar, Generic, Optional, List, Dict, Any
from uuid import UUID

from ..core.temporal import RawTimestamp


# Type aliases
EntityId = str | UUID


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class Entity:
    """
    Base entity with common fields.

    ``created_at`` keeps whatever encoding the store delivered; read it
    through ``normalize_timestamp``.
    """
    id: EntityId
    created_at: RawTimestamp = field(default_factory=utc_now)

    def to_dict(self) -> Dict[str, Any]:
        """Convert entity to a plain dictionary"""
        return {f.name: _plain(getattr(self, f.name)) for f in fields(self)}


def _plain(value: Any) -> Any:
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, UUID):
        return str(value)
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, list):
        return [_plain(v) for v in value]
    if hasattr(value, 'to_dict'):
        return value.to_dict()
    return value


T = TypeVar('T', bound=Entity)


class BaseRepository(ABC, Generic[T]):
    """
    Abstract base repository defining standard CRUD operations.

    All repository implementations must inherit from this class
    and implement the abstract methods.
    """

    @abstractmethod
    async def create(self, entity: T) -> T:
        """
        Create a new entity.

        Args:
            entity: Entity to create

        Returns:
            Created entity with generated ID
        """
        pass

    @abstractmethod
    async def get_by_id(self, entity_id: EntityId) -> Optional[T]:
        """
        Get entity by ID.

        Returns:
            Entity if found, None otherwise
        """
        pass

    @abstractmethod
    async def get_all(
        self,
        skip: int = 0,
        limit: int = 100,
        filters: Optional[Dict[str, Any]] = None
    ) -> List[T]:
        """
        Get all entities with optional pagination and filtering.

        Args:
            skip: Number of entities to skip
            limit: Maximum number of entities to return
            filters: Optional attribute equality filters
        """
        pass

    @abstractmethod
    async def update(self, entity_id: EntityId, data: Dict[str, Any]) -> Optional[T]:
        """
        Update an existing entity.

        Returns:
            Updated entity if found, None otherwise
        """
        pass

    @abstractmethod
    async def delete(self, entity_id: EntityId) -> bool:
        """Delete an entity. True if deleted, False if not found."""
        pass

    @abstractmethod
    async def count(self, filters: Optional[Dict[str, Any]] = None) -> int:
        """Count entities matching filters"""
        pass
