"""Crave Store: the in-memory source of truth for all ten entity collections.

Invariants:
    - CraveStore is the sole owner of entity state; routes never hold records across requests
    - create_* stamps id and created_at/date; callers never supply them
    - get_*/update_* return None for unknown ids (no exceptions for "not found")
    - No referential integrity: foreign-key-like ids are stored unchecked
    - At most one playing track per restaurant (enforced inside the music lock)

Design Decisions:
    - One explicit store object created in the lifespan and attached to app.state,
      injected via get_store (no module-level singleton)
    - Query helpers are linear scans over Collection (small data, no indexes)
    - Location query returns (record, distance) pairs: the record stays a pure
      entity, distance is a property of the query
"""

import logging
from datetime import datetime, timezone
from typing import Any

from fastapi import Request

from crave.core.domain_types import DistanceKm
from crave.core.geo import haversine_km
from crave.core.table_codes import build_table_qr_url
from crave.db.collection import Collection
from crave.models import (
    MenuItem, Music, Order, OrderItem, Reservation, Restaurant, Review,
    ServiceRequest, Table, User,
)

logger = logging.getLogger(__name__)

DEFAULT_QR_CODE_SERVICE_URL = "https://api.qrserver.com/v1/create-qr-code/"
DEFAULT_TABLE_LINK_BASE_URL = "https://crave.app/table"


def _now() -> datetime:
    return datetime.now(timezone.utc)


class CraveStore:
    """In-memory store: one Collection per entity plus entity-specific queries."""

    def __init__(
        self,
        qr_code_service_url: str = DEFAULT_QR_CODE_SERVICE_URL,
        table_link_base_url: str = DEFAULT_TABLE_LINK_BASE_URL,
    ):
        self.qr_code_service_url = qr_code_service_url
        self.table_link_base_url = table_link_base_url
        self.users: Collection[User] = Collection("users")
        self.restaurants: Collection[Restaurant] = Collection("restaurants")
        self.reviews: Collection[Review] = Collection("reviews")
        self.menu_items: Collection[MenuItem] = Collection("menu_items")
        self.tables: Collection[Table] = Collection("tables")
        self.reservations: Collection[Reservation] = Collection("reservations")
        self.orders: Collection[Order] = Collection("orders")
        self.order_items: Collection[OrderItem] = Collection("order_items")
        self.music: Collection[Music] = Collection("music")
        self.service_requests: Collection[ServiceRequest] = Collection(
            "service_requests",
        )

    def counts(self) -> dict[str, int]:
        """Record count per collection (readiness probe)."""
        return {
            c.name: len(c) for c in (
                self.users, self.restaurants, self.reviews, self.menu_items,
                self.tables, self.reservations, self.orders,
                self.order_items, self.music, self.service_requests,
            )
        }

    # ─── Users ───────────────────────────────────────────────────

    def create_user(self, data: dict[str, Any]) -> User:
        user = self.users.insert(
            lambda i: User(id=i, created_at=_now(), **data),
        )
        logger.info(f"User {user.id} created", extra={"entity": "User", "entity_id": user.id})
        return user

    def get_user(self, user_id: int) -> User | None:
        return self.users.get(user_id)

    def get_user_by_username(self, username: str) -> User | None:
        wanted = username.lower()
        return self.users.find(lambda u: u.username.lower() == wanted)

    def get_user_by_email(self, email: str) -> User | None:
        wanted = email.lower()
        return self.users.find(lambda u: u.email.lower() == wanted)

    def get_user_by_wallet_address(self, wallet_address: str) -> User | None:
        return self.users.find(lambda u: u.wallet_address == wallet_address)

    def update_user(self, user_id: int, changes: dict[str, Any]) -> User | None:
        return self.users.update(user_id, changes)

    # ─── Restaurants ─────────────────────────────────────────────

    def create_restaurant(self, data: dict[str, Any]) -> Restaurant:
        restaurant = self.restaurants.insert(
            lambda i: Restaurant(id=i, created_at=_now(), **data),
        )
        logger.info(
            f"Restaurant {restaurant.id} created",
            extra={"entity": "Restaurant", "entity_id": restaurant.id},
        )
        return restaurant

    def get_restaurant(self, restaurant_id: int) -> Restaurant | None:
        return self.restaurants.get(restaurant_id)

    def get_all_restaurants(self) -> list[Restaurant]:
        return self.restaurants.all()

    def get_restaurants_by_owner(self, owner_id: int) -> list[Restaurant]:
        return self.restaurants.filter(lambda r: r.owner_id == owner_id)

    def get_restaurants_by_location(
        self, latitude: float, longitude: float, radius_km: float,
    ) -> list[tuple[Restaurant, DistanceKm]]:
        """Restaurants within radius_km of the point, nearest first."""
        with_distance = [
            (r, haversine_km(latitude, longitude, r.latitude, r.longitude))
            for r in self.restaurants.all()
        ]
        nearby = [pair for pair in with_distance if pair[1] <= radius_km]
        nearby.sort(key=lambda pair: pair[1])
        return nearby

    def update_restaurant(
        self, restaurant_id: int, changes: dict[str, Any],
    ) -> Restaurant | None:
        return self.restaurants.update(restaurant_id, changes)

    # ─── Reviews ─────────────────────────────────────────────────

    def create_review(self, data: dict[str, Any]) -> Review:
        return self.reviews.insert(lambda i: Review(id=i, date=_now(), **data))

    def get_review(self, review_id: int) -> Review | None:
        return self.reviews.get(review_id)

    def get_reviews_by_restaurant(self, restaurant_id: int) -> list[Review]:
        return self.reviews.filter(lambda r: r.restaurant_id == restaurant_id)

    def get_reviews_by_user(self, user_id: int) -> list[Review]:
        return self.reviews.filter(lambda r: r.user_id == user_id)

    # ─── Menu items ──────────────────────────────────────────────

    def create_menu_item(self, data: dict[str, Any]) -> MenuItem:
        return self.menu_items.insert(lambda i: MenuItem(id=i, **data))

    def get_menu_item(self, menu_item_id: int) -> MenuItem | None:
        return self.menu_items.get(menu_item_id)

    def get_menu_items_by_restaurant(self, restaurant_id: int) -> list[MenuItem]:
        return self.menu_items.filter(lambda m: m.restaurant_id == restaurant_id)

    def get_popular_menu_items(self, restaurant_id: int, limit: int) -> list[MenuItem]:
        """Top `limit` dishes of a restaurant by popularity, highest first."""
        items = self.get_menu_items_by_restaurant(restaurant_id)
        items.sort(key=lambda m: m.popularity, reverse=True)
        return items[:max(limit, 0)]

    def update_menu_item(
        self, menu_item_id: int, changes: dict[str, Any],
    ) -> MenuItem | None:
        return self.menu_items.update(menu_item_id, changes)

    # ─── Tables ──────────────────────────────────────────────────

    def create_table(self, data: dict[str, Any]) -> Table:
        data = dict(data)
        if not data.get("qr_code"):
            data["qr_code"] = build_table_qr_url(
                self.qr_code_service_url, self.table_link_base_url,
                data["table_number"],
            )
        return self.tables.insert(lambda i: Table(id=i, **data))

    def get_table(self, table_id: int) -> Table | None:
        return self.tables.get(table_id)

    def get_tables_by_restaurant(self, restaurant_id: int) -> list[Table]:
        return self.tables.filter(lambda t: t.restaurant_id == restaurant_id)

    def update_table(self, table_id: int, changes: dict[str, Any]) -> Table | None:
        return self.tables.update(table_id, changes)

    # ─── Reservations ────────────────────────────────────────────

    def create_reservation(self, data: dict[str, Any]) -> Reservation:
        reservation = self.reservations.insert(
            lambda i: Reservation(id=i, created_at=_now(), **data),
        )
        logger.info(
            f"Reservation {reservation.id} created for restaurant "
            f"{reservation.restaurant_id}",
            extra={"entity": "Reservation", "entity_id": reservation.id},
        )
        return reservation

    def get_reservation(self, reservation_id: int) -> Reservation | None:
        return self.reservations.get(reservation_id)

    def get_reservations_by_user(self, user_id: int) -> list[Reservation]:
        return self.reservations.filter(lambda r: r.user_id == user_id)

    def get_reservations_by_restaurant(self, restaurant_id: int) -> list[Reservation]:
        return self.reservations.filter(lambda r: r.restaurant_id == restaurant_id)

    def update_reservation(
        self, reservation_id: int, changes: dict[str, Any],
    ) -> Reservation | None:
        return self.reservations.update(reservation_id, changes)

    # ─── Orders ──────────────────────────────────────────────────

    def create_order(self, data: dict[str, Any]) -> Order:
        order = self.orders.insert(
            lambda i: Order(id=i, created_at=_now(), **data),
        )
        logger.info(
            f"Order {order.id} created for restaurant {order.restaurant_id}",
            extra={"entity": "Order", "entity_id": order.id},
        )
        return order

    def get_order(self, order_id: int) -> Order | None:
        return self.orders.get(order_id)

    def get_orders_by_user(self, user_id: int) -> list[Order]:
        return self.orders.filter(lambda o: o.user_id == user_id)

    def get_orders_by_restaurant(self, restaurant_id: int) -> list[Order]:
        return self.orders.filter(lambda o: o.restaurant_id == restaurant_id)

    def update_order(self, order_id: int, changes: dict[str, Any]) -> Order | None:
        return self.orders.update(order_id, changes)

    # ─── Order items ─────────────────────────────────────────────

    def create_order_item(self, data: dict[str, Any]) -> OrderItem:
        return self.order_items.insert(lambda i: OrderItem(id=i, **data))

    def get_order_item(self, order_item_id: int) -> OrderItem | None:
        return self.order_items.get(order_item_id)

    def get_order_items_by_order(self, order_id: int) -> list[OrderItem]:
        return self.order_items.filter(lambda o: o.order_id == order_id)

    # ─── Music ───────────────────────────────────────────────────

    def create_music(self, data: dict[str, Any]) -> Music:
        with self.music.atomic():
            track = self.music.insert(
                lambda i: Music(id=i, created_at=_now(), **data),
            )
            if track.is_playing:
                self._stop_other_tracks(track)
        return track

    def get_music(self, music_id: int) -> Music | None:
        return self.music.get(music_id)

    def get_music_by_restaurant(self, restaurant_id: int) -> list[Music]:
        """Restaurant queue, most upvoted first."""
        tracks = self.music.filter(lambda m: m.restaurant_id == restaurant_id)
        tracks.sort(key=lambda m: m.upvotes, reverse=True)
        return tracks

    def get_currently_playing_music(self, restaurant_id: int) -> Music | None:
        return self.music.find(
            lambda m: m.restaurant_id == restaurant_id and m.is_playing,
        )

    def update_music(self, music_id: int, changes: dict[str, Any]) -> Music | None:
        with self.music.atomic():
            track = self.music.update(music_id, changes)
            if track is not None and track.is_playing:
                self._stop_other_tracks(track)
        return track

    def upvote_music(self, music_id: int) -> Music | None:
        """Increment upvotes by exactly one. None if the track is unknown."""
        return self.music.modify(music_id, lambda m: {"upvotes": m.upvotes + 1})

    def _stop_other_tracks(self, playing: Music) -> None:
        others = self.music.filter(
            lambda m: m.restaurant_id == playing.restaurant_id
            and m.is_playing and m.id != playing.id,
        )
        for track in others:
            self.music.update(track.id, {"is_playing": False})

    # ─── Service requests ────────────────────────────────────────

    def create_service_request(self, data: dict[str, Any]) -> ServiceRequest:
        request = self.service_requests.insert(
            lambda i: ServiceRequest(id=i, created_at=_now(), **data),
        )
        logger.info(
            f"Service request {request.id} ({request.type.value}) "
            f"at table {request.table_id}",
            extra={"entity": "ServiceRequest", "entity_id": request.id},
        )
        return request

    def get_service_request(self, request_id: int) -> ServiceRequest | None:
        return self.service_requests.get(request_id)

    def get_service_requests_by_restaurant(
        self, restaurant_id: int,
    ) -> list[ServiceRequest]:
        return self.service_requests.filter(
            lambda s: s.restaurant_id == restaurant_id,
        )

    def update_service_request(
        self, request_id: int, changes: dict[str, Any],
    ) -> ServiceRequest | None:
        return self.service_requests.update(request_id, changes)


def get_store(request: Request) -> CraveStore:
    """FastAPI dependency: the store attached to the app in the lifespan."""
    store = getattr(request.app.state, "store", None)
    if store is None:
        raise RuntimeError("Store not initialized")
    return store
