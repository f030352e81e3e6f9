"""Domain Types: rich types that replace bare primitives across the codebase.

Invariants:
    - Every entity id is a positive int wrapped in its own NewType
    - All valid states encoded as str Enums (no raw string matching)

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

UserId = NewType("UserId", int)
RestaurantId = NewType("RestaurantId", int)
ReviewId = NewType("ReviewId", int)
MenuItemId = NewType("MenuItemId", int)
TableId = NewType("TableId", int)
ReservationId = NewType("ReservationId", int)
OrderId = NewType("OrderId", int)
OrderItemId = NewType("OrderItemId", int)
MusicId = NewType("MusicId", int)
ServiceRequestId = NewType("ServiceRequestId", int)


# ─── Value Types ─────────────────────────────────────────────────

DistanceKm = NewType("DistanceKm", float)


# ─── Enums ───────────────────────────────────────────────────────

class UserRole(str, Enum):
    """Account roles. Owners manage restaurants from the dashboard."""
    CUSTOMER = "customer"
    RESTAURANT_OWNER = "restaurant_owner"


class ReservationStatus(str, Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    CANCELLED = "cancelled"


class OrderStatus(str, Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class ServiceRequestStatus(str, Enum):
    PENDING = "pending"
    COMPLETED = "completed"
    REJECTED = "rejected"


class ServiceRequestType(str, Enum):
    """Waiter call or free-text special request from a seated guest."""
    WAITER = "waiter"
    SPECIAL = "special"
