"""Reservation record. status follows core/status_transitions.py."""

from dataclasses import dataclass
from datetime import datetime
from typing import ClassVar

from crave.core.domain_types import (
    ReservationId, ReservationStatus, RestaurantId, TableId, UserId,
)


@dataclass(frozen=True)
class Reservation:
    id: ReservationId
    user_id: UserId
    restaurant_id: RestaurantId
    date: datetime
    time: str
    guests: int
    created_at: datetime
    status: ReservationStatus = ReservationStatus.PENDING
    table_id: TableId | None = None
    special_requests: str | None = None

    MUTABLE_FIELDS: ClassVar[frozenset[str]] = frozenset({
        "status", "table_id", "special_requests",
    })
