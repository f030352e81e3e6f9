"""Entity Records: one frozen dataclass per stored entity.

Invariants:
    - Records are immutable; updates produce a new record via dataclasses.replace
    - MUTABLE_FIELDS lists exactly the fields a patch may change
    - id and creation timestamps are server-owned and never in MUTABLE_FIELDS

Design Decisions:
    - One file per entity for locality
    - Dataclasses over pydantic models: records are internal, schemas are the API contract
"""

from crave.models.user import User  # noqa: F401
from crave.models.restaurant import Restaurant  # noqa: F401
from crave.models.review import Review  # noqa: F401
from crave.models.menu_item import MenuItem  # noqa: F401
from crave.models.table import Table  # noqa: F401
from crave.models.reservation import Reservation  # noqa: F401
from crave.models.order import Order  # noqa: F401
from crave.models.order_item import OrderItem  # noqa: F401
from crave.models.music import Music  # noqa: F401
from crave.models.service_request import ServiceRequest  # noqa: F401
