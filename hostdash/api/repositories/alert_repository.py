"""
Alert Repository Interface
"""
from abc import abstractmethod
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional, List

from .base import BaseRepository, Entity


class AlertType(str, Enum):
    INFO = "info"
    WARNING = "warning"
    SUCCESS = "success"
    ERROR = "error"
    RENEWAL = "renewal"


class AlertPriority(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


@dataclass
class AlertEntity(Entity):
    """User alert"""
    user_id: str = ""
    title: str = ""
    message: str = ""
    type: AlertType = AlertType.INFO
    priority: AlertPriority = AlertPriority.MEDIUM
    read: bool = False
    read_at: Optional[datetime] = None
    action_url: Optional[str] = None
    action_text: Optional[str] = None
    created_by: Optional[str] = None


class AlertRepository(BaseRepository[AlertEntity]):
    """Repository interface for user alerts"""

    @abstractmethod
    async def get_by_user(self, user_id: str, limit: int = 20) -> List[AlertEntity]:
        """Get the newest ``limit`` alerts of a user"""
        pass

    @abstractmethod
    async def mark_as_read(self, alert_id: str) -> Optional[AlertEntity]:
        """
        Set the read flag. Already-read alerts are returned unchanged.

        Returns:
            The alert, or None if it does not exist
        """
        pass
