"""
Alert Service
Inbox operations on user alerts: mark read, create, bulk send.
"""
from typing import List, Optional, Sequence
import asyncio

from ..core.errors import AlertNotFoundError
from ..core.logging_framework import LogCategory, get_logger
from ..repositories.alert_repository import (
    AlertEntity,
    AlertPriority,
    AlertRepository,
    AlertType,
)

logger = get_logger("hostdash.alerts")


class AlertService:
    """Alert operations scoped to the owning user"""

    def __init__(self, repository: AlertRepository):
        self.repository = repository

    async def mark_as_read(self, user_id: str, alert_id: str) -> AlertEntity:
        """
        Mark one of the user's alerts as read.

        Repeated calls leave ``read_at`` at its first value.

        Raises:
            AlertNotFoundError: unknown alert or one owned by another user
        """
        alert = await self.repository.get_by_id(alert_id)
        if alert is None or alert.user_id != user_id:
            raise AlertNotFoundError(alert_id)

        updated = await self.repository.mark_as_read(alert_id)
        if updated is None:
            # Deleted between the lookup and the update
            raise AlertNotFoundError(alert_id)

        logger.debug(
            f"Alert {alert_id} marked as read",
            category=LogCategory.BUSINESS,
            extra_data={"user_id": user_id}
        )
        return updated

    async def create_alert(
        self,
        user_id: str,
        title: str,
        message: str,
        type: AlertType = AlertType.INFO,
        priority: AlertPriority = AlertPriority.MEDIUM,
        action_url: Optional[str] = None,
        action_text: Optional[str] = None,
        created_by: str = "admin"
    ) -> AlertEntity:
        """Create an unread alert for ``user_id``"""
        alert = AlertEntity(
            id="",
            user_id=user_id,
            title=title,
            message=message,
            type=AlertType(type),
            priority=AlertPriority(priority),
            read=False,
            created_by=created_by
        )
        # Action link and label are only stored when given
        if action_url:
            alert.action_url = action_url
        if action_text:
            alert.action_text = action_text

        created = await self.repository.create(alert)
        logger.info(
            f"Alert created for user {user_id}",
            category=LogCategory.BUSINESS,
            extra_data={"alert_id": str(created.id), "type": created.type.value}
        )
        return created

    async def send_bulk_alerts(
        self,
        user_ids: Sequence[str],
        title: str,
        message: str,
        **kwargs
    ) -> List[str]:
        """Send the same alert to every user concurrently; returns the new ids"""
        created = await asyncio.gather(*(
            self.create_alert(user_id, title, message, **kwargs)
            for user_id in user_ids
        ))
        logger.info(
            f"Bulk alert sent to {len(created)} users",
            category=LogCategory.BUSINESS
        )
        return [str(alert.id) for alert in created]


# Singleton instance
_alert_service: Optional[AlertService] = None


def get_alert_service() -> AlertService:
    """Get or create alert service instance"""
    global _alert_service
    if _alert_service is None:
        from ..core.container import get_container
        _alert_service = AlertService(get_container().alert_repository)
    return _alert_service


def reset_alert_service() -> None:
    """Drop the cached instance (for testing)"""
    global _alert_service
    _alert_service = None
