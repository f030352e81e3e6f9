"""Restaurant record, owned by a restaurant_owner user (owner_id not enforced)."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import ClassVar

from crave.core.domain_types import RestaurantId, UserId


@dataclass(frozen=True)
class Restaurant:
    id: RestaurantId
    name: str
    owner_id: UserId
    description: str
    cuisine: str
    address: str
    city: str
    latitude: float
    longitude: float
    phone: str
    opening_time: str
    closing_time: str
    price_range: str
    created_at: datetime
    features: list[str] = field(default_factory=list)
    images: list[str] = field(default_factory=list)

    MUTABLE_FIELDS: ClassVar[frozenset[str]] = frozenset({
        "name", "description", "cuisine", "address", "city",
        "latitude", "longitude", "phone", "opening_time", "closing_time",
        "price_range", "features", "images",
    })
