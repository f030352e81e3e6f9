"""Table record. qr_code is the URL of the QR image printed on the table."""

from dataclasses import dataclass
from typing import ClassVar

from crave.core.domain_types import RestaurantId, TableId


@dataclass(frozen=True)
class Table:
    id: TableId
    restaurant_id: RestaurantId
    table_number: str
    capacity: int
    is_available: bool = True
    qr_code: str | None = None

    MUTABLE_FIELDS: ClassVar[frozenset[str]] = frozenset({
        "table_number", "capacity", "is_available", "qr_code",
    })
