"""Reservation Schemas.

Invariants:
    - guests: 1-50
    - status on creation defaults to pending; later changes go through ReservationStatusUpdate
"""

from datetime import datetime

from pydantic import Field

from crave.core.domain_types import ReservationStatus
from crave.schemas.base import CamelModel


class ReservationCreate(CamelModel):
    user_id: int = Field(ge=1)
    restaurant_id: int = Field(ge=1)
    table_id: int | None = Field(None, ge=1)
    date: datetime
    time: str = Field(min_length=1, max_length=20)
    guests: int = Field(ge=1, le=50)
    status: ReservationStatus = ReservationStatus.PENDING
    special_requests: str | None = Field(None, max_length=1000)


class ReservationStatusUpdate(CamelModel):
    status: ReservationStatus


class ReservationResponse(CamelModel):
    id: int
    user_id: int
    restaurant_id: int
    table_id: int | None = None
    date: datetime
    time: str
    guests: int
    status: ReservationStatus
    special_requests: str | None = None
    created_at: datetime
