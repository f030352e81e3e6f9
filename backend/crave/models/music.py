"""Music record: a guest-requested track in a restaurant's queue.

Invariants:
    - upvotes only grows, one per upvote call
    - At most one track per restaurant has is_playing=True (enforced by the store)
"""

from dataclasses import dataclass
from datetime import datetime
from typing import ClassVar

from crave.core.domain_types import MusicId, RestaurantId, UserId


@dataclass(frozen=True)
class Music:
    id: MusicId
    restaurant_id: RestaurantId
    title: str
    artist: str
    requested_by: UserId
    created_at: datetime
    upvotes: int = 0
    is_playing: bool = False

    MUTABLE_FIELDS: ClassVar[frozenset[str]] = frozenset({"upvotes", "is_playing"})
