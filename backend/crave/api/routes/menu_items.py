from fastapi import APIRouter, Depends, status

from crave.core.errors import ResourceNotFoundError
from crave.infrastructure.store import CraveStore, get_store
from crave.schemas.menu import MenuItemCreate, MenuItemResponse, MenuItemUpdate

router = APIRouter(prefix="/api/menu-items", tags=["menu"])


@router.post(
    "", response_model=MenuItemResponse, status_code=status.HTTP_201_CREATED,
)
async def create_menu_item(
    body: MenuItemCreate, store: CraveStore = Depends(get_store),
):
    return store.create_menu_item(body.model_dump())


@router.get("/{menu_item_id}", response_model=MenuItemResponse)
async def get_menu_item(menu_item_id: int, store: CraveStore = Depends(get_store)):
    item = store.get_menu_item(menu_item_id)
    if item is None:
        raise ResourceNotFoundError("MenuItem", menu_item_id)
    return item


@router.patch("/{menu_item_id}", response_model=MenuItemResponse)
async def update_menu_item(
    menu_item_id: int, body: MenuItemUpdate,
    store: CraveStore = Depends(get_store),
):
    item = store.update_menu_item(menu_item_id, body.changes())
    if item is None:
        raise ResourceNotFoundError("MenuItem", menu_item_id)
    return item
