"""Status Updates: lifecycle changes for reservations, orders and service requests.

Invariants:
    - Check and write happen under the collection lock (no lost concurrent updates)
    - Re-applying the current status always succeeds
    - Illegal moves raise InvalidStatusTransitionError only when enforcement is on
"""

import logging
from enum import Enum
from typing import Any

from crave.core.errors import ResourceNotFoundError
from crave.core.status_transitions import check_transition
from crave.db.collection import Collection

logger = logging.getLogger(__name__)


def change_status(
    collection: Collection,
    entity: str,
    record_id: int,
    requested: Enum,
    transitions: dict,
    enforce: bool = True,
) -> Any:
    """Set `status` on a record, validating the move against `transitions`."""

    def compute(current) -> dict:
        if enforce:
            check_transition(entity, transitions, current.status, requested)
        return {"status": requested}

    updated = collection.modify(record_id, compute)
    if updated is None:
        raise ResourceNotFoundError(entity, record_id)
    logger.info(
        f"{entity} {record_id} status -> {requested.value}",
        extra={"entity": entity, "entity_id": record_id},
    )
    return updated
