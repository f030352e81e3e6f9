"""Review record: append-only, date stamped at creation."""

from dataclasses import dataclass
from datetime import datetime
from typing import ClassVar

from crave.core.domain_types import RestaurantId, ReviewId, UserId


@dataclass(frozen=True)
class Review:
    id: ReviewId
    restaurant_id: RestaurantId
    user_id: UserId
    rating: float
    date: datetime
    comment: str | None = None

    MUTABLE_FIELDS: ClassVar[frozenset[str]] = frozenset()
