"""ServiceRequest record: waiter call or special request from a table."""

from dataclasses import dataclass
from datetime import datetime
from typing import ClassVar

from crave.core.domain_types import (
    RestaurantId, ServiceRequestId, ServiceRequestStatus,
    ServiceRequestType, TableId, UserId,
)


@dataclass(frozen=True)
class ServiceRequest:
    id: ServiceRequestId
    user_id: UserId
    restaurant_id: RestaurantId
    table_id: TableId
    type: ServiceRequestType
    created_at: datetime
    status: ServiceRequestStatus = ServiceRequestStatus.PENDING
    description: str | None = None

    MUTABLE_FIELDS: ClassVar[frozenset[str]] = frozenset({"status", "description"})
