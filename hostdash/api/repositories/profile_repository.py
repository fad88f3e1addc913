"""
User Profile Repository Interface
"""
from abc import abstractmethod
from dataclasses import dataclass, field
from typing import Optional

from .base import BaseRepository, Entity


@dataclass
class NotificationPreferences:
    """Per-user notification toggles"""
    email_notifications: bool = True
    sms_notifications: bool = True
    marketing_emails: bool = False
    maintenance_alerts: bool = True

    def to_dict(self):
        return {
            "email_notifications": self.email_notifications,
            "sms_notifications": self.sms_notifications,
            "marketing_emails": self.marketing_emails,
            "maintenance_alerts": self.maintenance_alerts,
        }


@dataclass
class ProfileEntity(Entity):
    """User profile; ``id`` is the user id"""
    display_name: str = ""
    email: str = ""
    phone: Optional[str] = None
    company: Optional[str] = None
    avatar: Optional[str] = None
    preferences: NotificationPreferences = field(default_factory=NotificationPreferences)


class ProfileRepository(BaseRepository[ProfileEntity]):
    """Repository interface for user profiles"""

    @abstractmethod
    async def create_if_absent(self, profile: ProfileEntity) -> ProfileEntity:
        """Store the profile unless one exists; return the stored profile"""
        pass
