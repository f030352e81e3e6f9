"""Restaurant Routes: discovery, detail, owner CRUD, and per-restaurant listings.

Invariants:
    - GET /api/restaurants with both coordinates: radius-filtered, nearest first,
      each entry carrying `distance` in km; otherwise every restaurant, no distance
    - popular-dishes never returns more than `limit` items
    - currently-playing answers 404 when no track is playing

Design Decisions:
    - Coordinates checked with `is not None` so the equator and meridian are valid inputs
    - Defaults (radius, dish limit) come from Settings, not literals in the handler
"""

import dataclasses

from fastapi import APIRouter, Depends, Query, status

from crave.config import Settings, get_settings
from crave.core.errors import NothingPlayingError, ResourceNotFoundError
from crave.infrastructure.store import CraveStore, get_store
from crave.schemas.menu import MenuItemResponse
from crave.schemas.music import MusicResponse
from crave.schemas.order import OrderResponse
from crave.schemas.reservation import ReservationResponse
from crave.schemas.restaurant import (
    RestaurantCreate, RestaurantResponse, RestaurantUpdate,
)
from crave.schemas.review import ReviewResponse
from crave.schemas.service_request import ServiceRequestResponse
from crave.schemas.table import TableResponse

router = APIRouter(prefix="/api/restaurants", tags=["restaurants"])


@router.get("", response_model=list[RestaurantResponse])
async def list_restaurants(
    latitude: float | None = Query(None, ge=-90, le=90),
    longitude: float | None = Query(None, ge=-180, le=180),
    radius: float | None = Query(None, gt=0),
    store: CraveStore = Depends(get_store),
    settings: Settings = Depends(get_settings),
):
    """All restaurants, or those within `radius` km of a point."""
    if latitude is None or longitude is None:
        return store.get_all_restaurants()

    radius_km = radius if radius is not None else settings.default_search_radius_km
    return [
        {**dataclasses.asdict(restaurant), "distance": distance}
        for restaurant, distance in store.get_restaurants_by_location(
            latitude, longitude, radius_km,
        )
    ]


@router.post(
    "", response_model=RestaurantResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_restaurant(
    body: RestaurantCreate, store: CraveStore = Depends(get_store),
):
    return store.create_restaurant(body.model_dump())


@router.get("/{restaurant_id}", response_model=RestaurantResponse)
async def get_restaurant(
    restaurant_id: int, store: CraveStore = Depends(get_store),
):
    restaurant = store.get_restaurant(restaurant_id)
    if restaurant is None:
        raise ResourceNotFoundError("Restaurant", restaurant_id)
    return restaurant


@router.patch("/{restaurant_id}", response_model=RestaurantResponse)
async def update_restaurant(
    restaurant_id: int, body: RestaurantUpdate,
    store: CraveStore = Depends(get_store),
):
    restaurant = store.update_restaurant(restaurant_id, body.changes())
    if restaurant is None:
        raise ResourceNotFoundError("Restaurant", restaurant_id)
    return restaurant


@router.get("/{restaurant_id}/reviews", response_model=list[ReviewResponse])
async def list_reviews(restaurant_id: int, store: CraveStore = Depends(get_store)):
    return store.get_reviews_by_restaurant(restaurant_id)


@router.get("/{restaurant_id}/menu", response_model=list[MenuItemResponse])
async def list_menu(restaurant_id: int, store: CraveStore = Depends(get_store)):
    return store.get_menu_items_by_restaurant(restaurant_id)


@router.get(
    "/{restaurant_id}/popular-dishes", response_model=list[MenuItemResponse],
)
async def list_popular_dishes(
    restaurant_id: int,
    limit: int | None = Query(None, ge=1, le=100),
    store: CraveStore = Depends(get_store),
    settings: Settings = Depends(get_settings),
):
    """Most popular dishes first, at most `limit` (default 4)."""
    if limit is None:
        limit = settings.popular_dishes_default_limit
    return store.get_popular_menu_items(restaurant_id, limit)


@router.get("/{restaurant_id}/tables", response_model=list[TableResponse])
async def list_tables(restaurant_id: int, store: CraveStore = Depends(get_store)):
    return store.get_tables_by_restaurant(restaurant_id)


@router.get(
    "/{restaurant_id}/reservations", response_model=list[ReservationResponse],
)
async def list_reservations(
    restaurant_id: int, store: CraveStore = Depends(get_store),
):
    return store.get_reservations_by_restaurant(restaurant_id)


@router.get("/{restaurant_id}/orders", response_model=list[OrderResponse])
async def list_orders(restaurant_id: int, store: CraveStore = Depends(get_store)):
    return store.get_orders_by_restaurant(restaurant_id)


@router.get("/{restaurant_id}/music", response_model=list[MusicResponse])
async def list_music(restaurant_id: int, store: CraveStore = Depends(get_store)):
    """Music queue, most upvoted first."""
    return store.get_music_by_restaurant(restaurant_id)


@router.get("/{restaurant_id}/currently-playing", response_model=MusicResponse)
async def currently_playing(
    restaurant_id: int, store: CraveStore = Depends(get_store),
):
    track = store.get_currently_playing_music(restaurant_id)
    if track is None:
        raise NothingPlayingError(restaurant_id)
    return track


@router.get(
    "/{restaurant_id}/service-requests",
    response_model=list[ServiceRequestResponse],
)
async def list_service_requests(
    restaurant_id: int, store: CraveStore = Depends(get_store),
):
    return store.get_service_requests_by_restaurant(restaurant_id)
