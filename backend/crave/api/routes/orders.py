"""Order Routes: checkout, line items, and kitchen status updates.

Invariants:
    - An order and its items are separate requests; a failed item never rolls back the order
"""

from fastapi import APIRouter, Depends, status

from crave.config import Settings, get_settings
from crave.core.errors import ResourceNotFoundError
from crave.core.status_transitions import ORDER_TRANSITIONS
from crave.infrastructure.store import CraveStore, get_store
from crave.schemas.order import (
    OrderCreate, OrderItemCreate, OrderItemResponse, OrderResponse,
    OrderStatusUpdate,
)
from crave.services.status_updates import change_status

router = APIRouter(prefix="/api", tags=["orders"])


@router.post(
    "/orders", response_model=OrderResponse, status_code=status.HTTP_201_CREATED,
)
async def create_order(body: OrderCreate, store: CraveStore = Depends(get_store)):
    return store.create_order(body.model_dump())


@router.get("/orders/{order_id}", response_model=OrderResponse)
async def get_order(order_id: int, store: CraveStore = Depends(get_store)):
    order = store.get_order(order_id)
    if order is None:
        raise ResourceNotFoundError("Order", order_id)
    return order


@router.patch("/orders/{order_id}", response_model=OrderResponse)
async def update_order_status(
    order_id: int,
    body: OrderStatusUpdate,
    store: CraveStore = Depends(get_store),
    settings: Settings = Depends(get_settings),
):
    return change_status(
        store.orders, "Order", order_id, body.status,
        ORDER_TRANSITIONS, settings.enforce_status_transitions,
    )


@router.get("/orders/{order_id}/items", response_model=list[OrderItemResponse])
async def list_order_items(order_id: int, store: CraveStore = Depends(get_store)):
    return store.get_order_items_by_order(order_id)


@router.post(
    "/order-items", response_model=OrderItemResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_order_item(
    body: OrderItemCreate, store: CraveStore = Depends(get_store),
):
    return store.create_order_item(body.model_dump())
