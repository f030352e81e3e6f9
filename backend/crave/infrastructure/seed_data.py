"""Sample Data: demo users, restaurants, menu, reviews, tables and music.

Invariants:
    - Seeding goes through CraveStore.create_* (same id/timestamp rules as the API)
    - Intended for an empty store; ids in the data assume users 1-2 and restaurants 1-3

Design Decisions:
    - Enabled by SEED_SAMPLE_DATA (default on) so the client has something to show
"""

import logging

from crave.core.credentials import hash_password
from crave.core.domain_types import UserRole
from crave.infrastructure.store import CraveStore

logger = logging.getLogger(__name__)

SAMPLE_PASSWORD = "password123"
IMAGE_BASE = "https://images.unsplash.com"


def seed_sample_data(store: CraveStore) -> None:
    """Populate the store with the demo dataset."""
    customer = store.create_user({
        "username": "johndoe",
        "password_hash": hash_password(SAMPLE_PASSWORD),
        "email": "john@example.com",
        "name": "John Doe",
        "role": UserRole.CUSTOMER,
        "profile_img": "https://i.pravatar.cc/150?img=1",
    })
    owner = store.create_user({
        "username": "janesmith",
        "password_hash": hash_password(SAMPLE_PASSWORD),
        "email": "jane@example.com",
        "name": "Jane Smith",
        "role": UserRole.RESTAURANT_OWNER,
        "profile_img": "https://i.pravatar.cc/150?img=5",
    })

    store.create_restaurant({
        "name": "The Brasserie",
        "owner_id": owner.id,
        "description": "A cozy restaurant serving Italian and Continental cuisine.",
        "cuisine": "Italian, Continental, Beverages",
        "address": "123 Main St",
        "city": "New York",
        "latitude": 40.7128,
        "longitude": -74.0060,
        "phone": "123-456-7890",
        "opening_time": "10:00 AM",
        "closing_time": "11:00 PM",
        "price_range": "$$",
        "features": ["Dine-in", "Serves Alcohol", "Free Wi-Fi", "Outdoor seating"],
        "images": [
            f"{IMAGE_BASE}/photo-1517248135467-4c7edcad34c4",
            f"{IMAGE_BASE}/photo-1544148103-0773bf10d330",
        ],
    })
    store.create_restaurant({
        "name": "Café Latte",
        "owner_id": owner.id,
        "description": "Trendy cafe offering coffee, desserts and light meals.",
        "cuisine": "Cafe, Desserts, Coffee",
        "address": "456 Oak St",
        "city": "New York",
        "latitude": 40.7200,
        "longitude": -74.0100,
        "phone": "123-456-7891",
        "opening_time": "08:00 AM",
        "closing_time": "09:00 PM",
        "price_range": "$",
        "features": ["Dine-in", "Pure Veg", "Free Wi-Fi"],
        "images": [
            f"{IMAGE_BASE}/photo-1554118811-1e0d58224f24",
            f"{IMAGE_BASE}/photo-1495474472287-4d71bcdd2085",
        ],
    })
    seaside = store.create_restaurant({
        "name": "Seaside Grill",
        "owner_id": owner.id,
        "description": "Seafood restaurant with panoramic ocean views.",
        "cuisine": "Seafood, Grill, Asian",
        "address": "789 Shore Dr",
        "city": "New York",
        "latitude": 40.7300,
        "longitude": -74.0200,
        "phone": "123-456-7892",
        "opening_time": "11:00 AM",
        "closing_time": "11:00 PM",
        "price_range": "$$$",
        "features": ["Dine-in", "Serves Alcohol", "Outdoor seating", "Live music"],
        "images": [
            f"{IMAGE_BASE}/photo-1514933651103-005eec06c04b",
            f"{IMAGE_BASE}/photo-1523371683773-affcb5eb1c31",
        ],
    })

    dishes = [
        ("Grilled Salmon", "Fresh Atlantic salmon with lemon butter sauce",
         24.99, "Main Course", "photo-1504674900247-0877df9cc836", 95),
        ("Seafood Platter", "Prawns, calamari, fish and mussels",
         42.99, "Main Course", "photo-1559847844-5315695dadae", 92),
        ("Asian Salad", "Fresh greens with Asian dressing and seared tuna",
         18.99, "Starters", "photo-1546069901-ba9599a7e63c", 89),
        ("Sushi Rolls", "Assortment of fresh sushi rolls with wasabi and soy sauce",
         22.99, "Starters", "photo-1563379926898-05f4575a45d8", 86),
    ]
    for name, description, price, category, image, popularity in dishes:
        store.create_menu_item({
            "restaurant_id": seaside.id,
            "name": name,
            "description": description,
            "price": price,
            "category": category,
            "image": f"{IMAGE_BASE}/{image}",
            "popularity": float(popularity),
            "is_available": True,
        })

    store.create_review({
        "restaurant_id": seaside.id, "user_id": customer.id, "rating": 4.8,
        "comment": "The seafood platter was absolutely incredible!",
    })
    store.create_review({
        "restaurant_id": seaside.id, "user_id": customer.id, "rating": 4.5,
        "comment": "The grilled salmon was cooked to perfection.",
    })

    store.create_table({"restaurant_id": seaside.id, "table_number": "12", "capacity": 4})
    store.create_table({"restaurant_id": seaside.id, "table_number": "13", "capacity": 2})

    tracks = [
        ("Fly Me To The Moon", "Frank Sinatra", 10, True),
        ("Summertime", "Ella Fitzgerald", 8, False),
        ("La Vie En Rose", "Louis Armstrong", 5, False),
    ]
    for title, artist, upvotes, is_playing in tracks:
        store.create_music({
            "restaurant_id": seaside.id, "title": title, "artist": artist,
            "requested_by": customer.id, "upvotes": upvotes,
            "is_playing": is_playing,
        })

    logger.info("Sample data seeded", extra={"entity": "store"})
