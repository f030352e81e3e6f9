"""Order record. Its OrderItems are created by separate requests."""

from dataclasses import dataclass
from datetime import datetime
from typing import ClassVar

from crave.core.domain_types import (
    OrderId, OrderStatus, RestaurantId, TableId, UserId,
)


@dataclass(frozen=True)
class Order:
    id: OrderId
    user_id: UserId
    restaurant_id: RestaurantId
    total: float
    created_at: datetime
    status: OrderStatus = OrderStatus.PENDING
    table_id: TableId | None = None

    MUTABLE_FIELDS: ClassVar[frozenset[str]] = frozenset({"status"})
