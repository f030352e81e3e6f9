from dataclasses import dataclass
from typing import ClassVar

from crave.core.domain_types import MenuItemId, OrderId, OrderItemId


@dataclass(frozen=True)
class OrderItem:
    id: OrderItemId
    order_id: OrderId
    menu_item_id: MenuItemId
    quantity: int
    subtotal: float
    special_instructions: str | None = None

    MUTABLE_FIELDS: ClassVar[frozenset[str]] = frozenset()
