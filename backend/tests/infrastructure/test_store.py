"""Crave Store — entity creation, lookups, location queries and music rules.

Invariants:
    - create_* assigns ids starting at 1 per collection and stamps timestamps
    - get_*/update_* return None for unknown ids
    - Location queries are radius-inclusive and ordered nearest first
    - At most one playing track per restaurant
"""

from datetime import datetime, timezone

import pytest

from crave.core.domain_types import ServiceRequestType, UserRole
from crave.infrastructure.store import CraveStore


@pytest.fixture
def store():
    return CraveStore(
        qr_code_service_url="https://qr.example/api",
        table_link_base_url="https://crave.test/table",
    )


def _restaurant(store, name="Seaside Grill", latitude=40.0, longitude=-74.0, owner_id=1):
    return store.create_restaurant({
        "name": name, "owner_id": owner_id, "description": "",
        "cuisine": "Seafood", "address": "789 Shore Dr", "city": "New York",
        "latitude": latitude, "longitude": longitude, "phone": "",
        "opening_time": "11:00 AM", "closing_time": "11:00 PM",
        "price_range": "$$", "features": [], "images": [],
    })


def _dish(store, name, popularity, restaurant_id=1):
    return store.create_menu_item({
        "restaurant_id": restaurant_id, "name": name, "price": 10.0,
        "category": "Main Course", "popularity": popularity,
    })


def _track(store, title, restaurant_id=1, is_playing=False, upvotes=0):
    return store.create_music({
        "restaurant_id": restaurant_id, "title": title, "artist": "Various",
        "requested_by": 1, "upvotes": upvotes, "is_playing": is_playing,
    })


# ─── Users ───────────────────────────────────────────────────────

def test_create_user_assigns_id_and_timestamp(store):
    user = store.create_user({
        "username": "johndoe", "email": "john@example.com",
        "password_hash": "x", "name": "John Doe", "role": UserRole.CUSTOMER,
    })
    assert user.id == 1
    assert user.created_at.tzinfo is not None
    assert store.get_user(1) == user


def test_user_lookups_ignore_case(store):
    store.create_user({
        "username": "JohnDoe", "email": "John@Example.com",
        "password_hash": "x", "name": "John", "role": UserRole.CUSTOMER,
        "wallet_address": "0xabc",
    })
    assert store.get_user_by_username("johndoe") is not None
    assert store.get_user_by_email("john@example.COM") is not None
    assert store.get_user_by_wallet_address("0xabc") is not None
    assert store.get_user_by_wallet_address("0xABC") is None


def test_unknown_ids_return_none(store):
    assert store.get_restaurant(1) is None
    assert store.update_restaurant(1, {"name": "X"}) is None
    assert store.get_order(42) is None
    assert store.upvote_music(7) is None


# ─── Restaurants ─────────────────────────────────────────────────

def test_ids_are_per_collection(store):
    _restaurant(store)
    dish = _dish(store, "Salmon", 1)
    assert dish.id == 1


def test_update_restaurant_keeps_identity(store):
    original = _restaurant(store)
    updated = store.update_restaurant(original.id, {"name": "Harbor Grill"})
    assert updated.name == "Harbor Grill"
    assert updated.id == original.id
    assert updated.created_at == original.created_at
    assert updated.cuisine == original.cuisine


def test_location_query_is_radius_filtered(store):
    near = _restaurant(store, "Near", 40.0, -74.0)
    _restaurant(store, "Far", 41.0, -74.0)

    within_100 = store.get_restaurants_by_location(40.0, -74.0, 100)
    assert [r.id for r, _ in within_100] == [near.id]
    assert within_100[0][1] == pytest.approx(0.0)


def test_location_query_orders_nearest_first(store):
    _restaurant(store, "Far", 41.0, -74.0)
    _restaurant(store, "Near", 40.0, -74.0)

    results = store.get_restaurants_by_location(40.0, -74.0, 112)
    assert [r.name for r, _ in results] == ["Near", "Far"]
    assert results[1][1] == pytest.approx(111.19, abs=0.01)


def test_location_query_boundary_is_inclusive(store):
    _restaurant(store, "Here", 10.0, 10.0)
    assert len(store.get_restaurants_by_location(10.0, 10.0, 0)) == 1


def test_restaurants_by_owner(store):
    _restaurant(store, owner_id=2)
    _restaurant(store, owner_id=3)
    assert [r.owner_id for r in store.get_restaurants_by_owner(2)] == [2]


# ─── Menu ────────────────────────────────────────────────────────

def test_popular_items_sorted_and_limited(store):
    for name, score in [("A", 50), ("B", 95), ("C", 70), ("D", 86), ("E", 10)]:
        _dish(store, name, score)
    _dish(store, "Other restaurant", 100, restaurant_id=2)

    popular = store.get_popular_menu_items(1, 4)
    assert [m.name for m in popular] == ["B", "D", "C", "A"]


def test_popular_items_limit_larger_than_menu(store):
    _dish(store, "Only", 1)
    assert len(store.get_popular_menu_items(1, 10)) == 1


# ─── Tables ──────────────────────────────────────────────────────

def test_table_gets_generated_qr_code(store):
    table = store.create_table({"restaurant_id": 1, "table_number": "12", "capacity": 4})
    assert table.qr_code.startswith("https://qr.example/api?")
    assert "crave.test%2Ftable%2F12" in table.qr_code


def test_table_keeps_supplied_qr_code(store):
    table = store.create_table({
        "restaurant_id": 1, "table_number": "3", "capacity": 2,
        "qr_code": "https://custom/qr.png",
    })
    assert table.qr_code == "https://custom/qr.png"


# ─── Reservations & orders ───────────────────────────────────────

def test_reservation_filters(store):
    when = datetime(2025, 6, 1, 19, 0, tzinfo=timezone.utc)
    for user_id, restaurant_id in [(1, 1), (1, 2), (2, 1)]:
        store.create_reservation({
            "user_id": user_id, "restaurant_id": restaurant_id,
            "date": when, "time": "7:00 PM", "guests": 2,
        })
    assert len(store.get_reservations_by_user(1)) == 2
    assert len(store.get_reservations_by_restaurant(1)) == 2


def test_order_items_by_order(store):
    order = store.create_order({"user_id": 1, "restaurant_id": 1, "total": 50.0})
    store.create_order_item({"order_id": order.id, "menu_item_id": 1, "quantity": 2, "subtotal": 20.0})
    store.create_order_item({"order_id": 99, "menu_item_id": 1, "quantity": 1, "subtotal": 10.0})
    assert [i.order_id for i in store.get_order_items_by_order(order.id)] == [order.id]


# ─── Music ───────────────────────────────────────────────────────

def test_upvote_three_times(store):
    track = _track(store, "Summertime")
    for _ in range(3):
        store.upvote_music(track.id)
    assert store.get_music(track.id).upvotes == 3


def test_queue_sorted_by_upvotes(store):
    _track(store, "Low", upvotes=1)
    _track(store, "High", upvotes=9)
    _track(store, "Elsewhere", restaurant_id=2, upvotes=50)
    assert [m.title for m in store.get_music_by_restaurant(1)] == ["High", "Low"]


def test_only_one_track_plays_per_restaurant(store):
    first = _track(store, "First", is_playing=True)
    other_place = _track(store, "Other", restaurant_id=2, is_playing=True)
    second = _track(store, "Second")

    store.update_music(second.id, {"is_playing": True})

    assert not store.get_music(first.id).is_playing
    assert store.get_music(other_place.id).is_playing
    assert store.get_currently_playing_music(1).id == second.id


def test_creating_playing_track_stops_current(store):
    first = _track(store, "First", is_playing=True)
    second = _track(store, "Second", is_playing=True)
    assert not store.get_music(first.id).is_playing
    assert store.get_currently_playing_music(1).id == second.id


def test_nothing_playing(store):
    _track(store, "Queued")
    assert store.get_currently_playing_music(1) is None


# ─── Service requests & counts ───────────────────────────────────

def test_service_requests_by_restaurant(store):
    store.create_service_request({
        "user_id": 1, "restaurant_id": 1, "table_id": 1, "type": ServiceRequestType.WAITER,
    })
    assert len(store.get_service_requests_by_restaurant(1)) == 1
    assert store.get_service_requests_by_restaurant(2) == []


def test_counts(store):
    _restaurant(store)
    counts = store.counts()
    assert counts["restaurants"] == 1
    assert counts["users"] == 0
    assert len(counts) == 10
