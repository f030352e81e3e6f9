"""User Routes: profile read/update and per-user listings."""

from fastapi import APIRouter, Depends

from crave.core.errors import ResourceNotFoundError
from crave.infrastructure.store import CraveStore, get_store
from crave.schemas.auth import UserResponse, UserUpdate
from crave.schemas.order import OrderResponse
from crave.schemas.reservation import ReservationResponse
from crave.schemas.restaurant import RestaurantResponse
from crave.schemas.review import ReviewResponse
from crave.services import accounts

router = APIRouter(prefix="/api/users", tags=["users"])


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(user_id: int, store: CraveStore = Depends(get_store)):
    user = store.get_user(user_id)
    if user is None:
        raise ResourceNotFoundError("User", user_id)
    return user


@router.patch("/{user_id}", response_model=UserResponse)
async def update_user(
    user_id: int, body: UserUpdate, store: CraveStore = Depends(get_store),
):
    return accounts.update_profile(store, user_id, body)


@router.get("/{user_id}/restaurants", response_model=list[RestaurantResponse])
async def list_owned_restaurants(
    user_id: int, store: CraveStore = Depends(get_store),
):
    return store.get_restaurants_by_owner(user_id)


@router.get("/{user_id}/reservations", response_model=list[ReservationResponse])
async def list_user_reservations(
    user_id: int, store: CraveStore = Depends(get_store),
):
    return store.get_reservations_by_user(user_id)


@router.get("/{user_id}/orders", response_model=list[OrderResponse])
async def list_user_orders(user_id: int, store: CraveStore = Depends(get_store)):
    return store.get_orders_by_user(user_id)


@router.get("/{user_id}/reviews", response_model=list[ReviewResponse])
async def list_user_reviews(user_id: int, store: CraveStore = Depends(get_store)):
    return store.get_reviews_by_user(user_id)
