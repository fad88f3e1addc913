"""
Order Repository Interface
"""
from abc import abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, List

from .base import BaseRepository, Entity


class OrderStatus(str, Enum):
    """Order lifecycle status"""
    PENDING = "pending"
    PROCESSING = "processing"
    COMPLETED = "completed"
    CANCELLED = "cancelled"
    REFUNDED = "refunded"


@dataclass
class OrderItem:
    """Single order line"""
    name: str
    price: float
    quantity: int = 1

    def to_dict(self):
        return {"name": self.name, "price": self.price, "quantity": self.quantity}


@dataclass
class OrderEntity(Entity):
    """Order entity"""
    user_id: str = ""
    items: List[OrderItem] = field(default_factory=list)
    # None when the store record has no amount; counted as 0
    total_amount: Optional[float] = None
    status: OrderStatus = OrderStatus.PENDING

    # Display metadata
    order_number: Optional[str] = None
    currency: str = "USD"
    payment_method: Optional[str] = None


class OrderRepository(BaseRepository[OrderEntity]):
    """Repository interface for order operations"""

    @abstractmethod
    async def get_by_user(self, user_id: str) -> List[OrderEntity]:
        """Get all orders of a user, newest first"""
        pass
