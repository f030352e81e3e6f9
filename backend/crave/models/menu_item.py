"""MenuItem record. popularity is only a sort key for popular dishes."""

from dataclasses import dataclass
from typing import ClassVar

from crave.core.domain_types import MenuItemId, RestaurantId


@dataclass(frozen=True)
class MenuItem:
    id: MenuItemId
    restaurant_id: RestaurantId
    name: str
    price: float
    category: str
    description: str | None = None
    image: str | None = None
    popularity: float = 0.0
    is_available: bool = True

    MUTABLE_FIELDS: ClassVar[frozenset[str]] = frozenset({
        "name", "price", "category", "description", "image",
        "popularity", "is_available",
    })
