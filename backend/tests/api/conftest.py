"""API test fixtures: FastAPI test client over a fresh in-memory store.

Invariants:
    - Every test gets a new CraveStore (ids restart at 1)
    - get_store, get_payment_gateway, get_geocoder, get_settings overridden
    - The lifespan never runs (ASGITransport does not send lifespan events)
"""

import pytest
from httpx import ASGITransport, AsyncClient

from crave.config import Settings, get_settings
from crave.infrastructure.geocoding import get_geocoder
from crave.infrastructure.payments import get_payment_gateway
from crave.infrastructure.store import CraveStore, get_store
from crave.main import app
from tests.api.fakes import (
    FakeGeocoder, FakePaymentGateway, register_payload,
)


@pytest.fixture
def store():
    return CraveStore()


@pytest.fixture
def payment_gateway():
    return FakePaymentGateway()


@pytest.fixture
def geocoder():
    return FakeGeocoder()


@pytest.fixture
def settings():
    return Settings()


@pytest.fixture
async def client(store, payment_gateway, geocoder, settings):
    """FastAPI test client with collaborators overridden."""
    app.dependency_overrides[get_store] = lambda: store
    app.dependency_overrides[get_payment_gateway] = lambda: payment_gateway
    app.dependency_overrides[get_geocoder] = lambda: geocoder
    app.dependency_overrides[get_settings] = lambda: settings

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()


@pytest.fixture
async def customer(client):
    res = await client.post("/api/auth/register", json=register_payload())
    assert res.status_code == 201
    return res.json()


@pytest.fixture
async def owner(client):
    res = await client.post("/api/auth/register", json=register_payload(
        username="janesmith", email="jane@example.com",
        name="Jane Smith", role="restaurant_owner",
    ))
    assert res.status_code == 201
    return res.json()
