"""Table Routes: QR-coded tables. Availability toggled by the reservation flow."""

from fastapi import APIRouter, Depends, status

from crave.core.errors import ResourceNotFoundError
from crave.infrastructure.store import CraveStore, get_store
from crave.schemas.table import TableCreate, TableResponse, TableUpdate

router = APIRouter(prefix="/api/tables", tags=["tables"])


@router.post("", response_model=TableResponse, status_code=status.HTTP_201_CREATED)
async def create_table(body: TableCreate, store: CraveStore = Depends(get_store)):
    return store.create_table(body.model_dump())


@router.get("/{table_id}", response_model=TableResponse)
async def get_table(table_id: int, store: CraveStore = Depends(get_store)):
    table = store.get_table(table_id)
    if table is None:
        raise ResourceNotFoundError("Table", table_id)
    return table


@router.patch("/{table_id}", response_model=TableResponse)
async def update_table(
    table_id: int, body: TableUpdate, store: CraveStore = Depends(get_store),
):
    table = store.update_table(table_id, body.changes())
    if table is None:
        raise ResourceNotFoundError("Table", table_id)
    return table
