"""Order and Order Item Schemas.

Invariants:
    - total and subtotal are non-negative; quantity >= 1
    - Orders and their items are created by separate requests (no rollback)
"""

from datetime import datetime

from pydantic import Field

from crave.core.domain_types import OrderStatus
from crave.schemas.base import CamelModel


class OrderCreate(CamelModel):
    user_id: int = Field(ge=1)
    restaurant_id: int = Field(ge=1)
    table_id: int | None = Field(None, ge=1)
    status: OrderStatus = OrderStatus.PENDING
    total: float = Field(ge=0)


class OrderStatusUpdate(CamelModel):
    status: OrderStatus


class OrderResponse(CamelModel):
    id: int
    user_id: int
    restaurant_id: int
    table_id: int | None = None
    status: OrderStatus
    total: float
    created_at: datetime


class OrderItemCreate(CamelModel):
    order_id: int = Field(ge=1)
    menu_item_id: int = Field(ge=1)
    quantity: int = Field(ge=1, le=100)
    subtotal: float = Field(ge=0)
    special_instructions: str | None = Field(None, max_length=500)


class OrderItemResponse(CamelModel):
    id: int
    order_id: int
    menu_item_id: int
    quantity: int
    subtotal: float
    special_instructions: str | None = None
