"""
Repository Layer
Abstract repository interfaces for dashboard data access.
"""
from .base import BaseRepository, Entity, EntityId
from .order_repository import OrderRepository, OrderEntity, OrderItem, OrderStatus
from .service_repository import (
    ServiceRepository,
    ServiceEntity,
    ServiceSpecs,
    ServiceStatus,
    ServiceType,
)
from .alert_repository import AlertRepository, AlertEntity, AlertPriority, AlertType
from .profile_repository import ProfileRepository, ProfileEntity, NotificationPreferences

__all__ = [
    "BaseRepository",
    "Entity",
    "EntityId",
    "OrderRepository",
    "OrderEntity",
    "OrderItem",
    "OrderStatus",
    "ServiceRepository",
    "ServiceEntity",
    "ServiceSpecs",
    "ServiceStatus",
    "ServiceType",
    "AlertRepository",
    "AlertEntity",
    "AlertPriority",
    "AlertType",
    "ProfileRepository",
    "ProfileEntity",
    "NotificationPreferences",
]
