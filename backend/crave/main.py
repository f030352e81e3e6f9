"""Crave API: FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map CraveError to structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Store, payment gateway and geocoder created in the lifespan and attached
      to app.state; routes reach them only through dependencies

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Three error handler layers: CraveError (domain), RequestValidationError
      (pydantic), Exception (catch-all), see api/error_handlers.py
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from crave.api.error_handlers import register_error_handlers
from crave.api.routes import (
    auth, health, locations, menu_items, music, orders, payments,
    reservations, restaurants, reviews, service_requests, tables, users,
)
from crave.config import get_settings
from crave.infrastructure.geocoding import NominatimGeocoder
from crave.infrastructure.observability import setup_logging
from crave.infrastructure.payments import StripePaymentGateway
from crave.infrastructure.seed_data import seed_sample_data
from crave.infrastructure.store import CraveStore

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)

    store = CraveStore(
        qr_code_service_url=settings.qr_code_service_url,
        table_link_base_url=settings.table_link_base_url,
    )
    if settings.seed_sample_data:
        seed_sample_data(store)
    app.state.store = store

    app.state.payment_gateway = StripePaymentGateway(
        settings.stripe_secret_key,
        currency=settings.payment_currency,
        payment_method_types=settings.payment_method_types,
    )
    if not app.state.payment_gateway.configured:
        logger.warning("STRIPE_SECRET_KEY not set: payment endpoints will answer 500")

    app.state.geocoder = NominatimGeocoder(
        base_url=settings.geocoding_base_url,
        user_agent=settings.geocoding_user_agent,
        timeout_seconds=settings.geocoding_timeout_seconds,
    )
    logger.info("Crave API started")
    yield
    await app.state.geocoder.aclose()
    logger.info("Crave API shutting down")


app = FastAPI(title="Crave API", version="1.0.0", lifespan=lifespan)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(auth.router)
app.include_router(users.router)
app.include_router(restaurants.router)
app.include_router(reviews.router)
app.include_router(menu_items.router)
app.include_router(tables.router)
app.include_router(reservations.router)
app.include_router(orders.router)
app.include_router(music.router)
app.include_router(service_requests.router)
app.include_router(payments.router)
app.include_router(locations.router)

register_error_handlers(app)
