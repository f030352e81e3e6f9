"""Status Transitions: allowed lifecycle moves for reservations, orders and service requests.

Invariants:
    - Re-applying the current status is always allowed (idempotent PATCH)
    - Terminal statuses have no outgoing transitions
    - check_transition is PURE: raises, never mutates

Design Decisions:
    - Tables as dicts keyed by enum: one place to read the whole lifecycle
    - Enforcement can be switched off by config for clients relying on free-form updates
"""

from enum import Enum

from crave.core.domain_types import (
    OrderStatus, ReservationStatus, ServiceRequestStatus,
)
from crave.core.errors import InvalidStatusTransitionError


RESERVATION_TRANSITIONS: dict[ReservationStatus, frozenset[ReservationStatus]] = {
    ReservationStatus.PENDING: frozenset({
        ReservationStatus.CONFIRMED, ReservationStatus.CANCELLED,
    }),
    ReservationStatus.CONFIRMED: frozenset({ReservationStatus.CANCELLED}),
    ReservationStatus.CANCELLED: frozenset(),
}

ORDER_TRANSITIONS: dict[OrderStatus, frozenset[OrderStatus]] = {
    OrderStatus.PENDING: frozenset({
        OrderStatus.CONFIRMED, OrderStatus.COMPLETED, OrderStatus.CANCELLED,
    }),
    OrderStatus.CONFIRMED: frozenset({
        OrderStatus.COMPLETED, OrderStatus.CANCELLED,
    }),
    OrderStatus.COMPLETED: frozenset(),
    OrderStatus.CANCELLED: frozenset(),
}

SERVICE_REQUEST_TRANSITIONS: dict[ServiceRequestStatus, frozenset[ServiceRequestStatus]] = {
    ServiceRequestStatus.PENDING: frozenset({
        ServiceRequestStatus.COMPLETED, ServiceRequestStatus.REJECTED,
    }),
    ServiceRequestStatus.COMPLETED: frozenset(),
    ServiceRequestStatus.REJECTED: frozenset(),
}


def is_allowed(table: dict, current: Enum, requested: Enum) -> bool:
    if current == requested:
        return True
    return requested in table.get(current, frozenset())


def check_transition(
    entity: str, table: dict, current: Enum, requested: Enum,
) -> None:
    """Raise InvalidStatusTransitionError if current -> requested is not allowed."""
    if not is_allowed(table, current, requested):
        raise InvalidStatusTransitionError(
            entity, current.value, requested.value,
        )
