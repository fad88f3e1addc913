"""
Provisioned Service Repository Interface
"""
from abc import abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, List

from .base import BaseRepository, Entity
from ..core.temporal import RawTimestamp


class ServiceType(str, Enum):
    VPS = "vps"
    DOMAIN = "domain"
    MINECRAFT = "minecraft"
    BOT = "bot"
    HOSTING = "hosting"
    CUSTOM = "custom"


class ServiceStatus(str, Enum):
    ACTIVE = "active"
    SUSPENDED = "suspended"
    PENDING = "pending"
    EXPIRED = "expired"


@dataclass
class ServiceSpecs:
    """Free-text specification attributes"""
    cpu: Optional[str] = None
    ram: Optional[str] = None
    storage: Optional[str] = None
    bandwidth: Optional[str] = None

    def to_dict(self):
        return {"cpu": self.cpu, "ram": self.ram, "storage": self.storage, "bandwidth": self.bandwidth}


@dataclass
class ServiceEntity(Entity):
    """A service provisioned for a customer"""
    user_id: str = ""
    name: str = ""
    type: ServiceType = ServiceType.CUSTOM
    status: ServiceStatus = ServiceStatus.PENDING
    price: float = 0.0
    expiry_date: RawTimestamp = None
    specs: Optional[ServiceSpecs] = None

    renewal_price: Optional[float] = None
    features: List[str] = field(default_factory=list)
    uptime: Optional[float] = None
    last_activity: RawTimestamp = None


class ServiceRepository(BaseRepository[ServiceEntity]):
    """Repository interface for provisioned services"""

    @abstractmethod
    async def get_by_user(self, user_id: str) -> List[ServiceEntity]:
        """Get all services of a user, newest first"""
        pass
