"""Test doubles and payload builders shared by API tests."""

import math

from crave.core.errors import GeocodingError, PaymentNotConfiguredError
from crave.infrastructure.geocoding import GeocodedLocation


class FakePaymentGateway:
    """Stands in for StripePaymentGateway; records every call."""

    def __init__(self, configured: bool = True):
        self.configured = configured
        self.calls: list[dict] = []

    async def create_payment_intent(self, amount, customer_id=None):
        if not self.configured:
            raise PaymentNotConfiguredError()
        self.calls.append({"amount": amount, "customer_id": customer_id})
        return f"pi_{math.floor(amount + 0.5)}_secret_test"


class FakeGeocoder:
    """Stands in for NominatimGeocoder; flip `fail` to simulate an outage."""

    def __init__(self):
        self.fail = False
        self.queries: list[str] = []

    async def search(self, query, limit=5):
        if self.fail:
            raise GeocodingError("down")
        self.queries.append(query)
        return [
            GeocodedLocation(40.7128, -74.006, "New York, United States"),
            GeocodedLocation(40.73, -73.93, "Brooklyn, New York"),
        ][:limit]

    async def reverse(self, latitude, longitude):
        if self.fail:
            raise GeocodingError("down")
        return GeocodedLocation(latitude, longitude, "New York, New York")


def restaurant_payload(owner_id: int = 1, **overrides) -> dict:
    payload = {
        "name": "Seaside Grill",
        "ownerId": owner_id,
        "description": "Seafood with ocean views.",
        "cuisine": "Seafood",
        "address": "789 Shore Dr",
        "city": "New York",
        "latitude": 40.0,
        "longitude": -74.0,
        "phone": "123-456-7892",
        "openingTime": "11:00 AM",
        "closingTime": "11:00 PM",
        "priceRange": "$$$",
        "features": ["Dine-in"],
        "images": [],
    }
    payload.update(overrides)
    return payload


def register_payload(**overrides) -> dict:
    payload = {
        "username": "johndoe",
        "password": "password123",
        "email": "john@example.com",
        "name": "John Doe",
    }
    payload.update(overrides)
    return payload
