"""
In-Memory Repository Implementations
Development and testing implementations using in-memory storage.
"""
from .order_repository import MemoryOrderRepository
from .service_repository import MemoryServiceRepository
from .alert_repository import MemoryAlertRepository
from .profile_repository import MemoryProfileRepository

__all__ = [
    "MemoryOrderRepository",
    "MemoryServiceRepository",
    "MemoryAlertRepository",
    "MemoryProfileRepository",
]
