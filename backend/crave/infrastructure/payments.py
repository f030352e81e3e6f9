"""Stripe Payment Gateway: creates payment intents and hands back their client secret.

Invariants:
    - Amounts are minor currency units (cents), rounded half up to int before the call
    - No secret key configured -> PaymentNotConfiguredError (500), no SDK call made
    - Every Stripe failure mapped to PaymentProviderError (core/errors.py)
    - Stripe messages are logged, never returned to the client

Design Decisions:
    - Wrapper over the raw SDK: routes depend on create_payment_intent(), tests fake it
    - Blocking SDK call run in a worker thread (asyncio.to_thread) to keep the loop free
    - api_key passed per call instead of the global stripe.api_key: no process-wide state
"""

import asyncio
import math
import logging
from collections.abc import Sequence

import stripe
from fastapi import Request

from crave.core.errors import PaymentNotConfiguredError, PaymentProviderError

logger = logging.getLogger(__name__)


class StripePaymentGateway:
    """Creates Stripe payment intents for checkout."""

    def __init__(
        self,
        secret_key: str | None,
        currency: str = "usd",
        payment_method_types: Sequence[str] = ("card",),
    ):
        self.secret_key = secret_key
        self.currency = currency
        self.payment_method_types = list(payment_method_types)

    @property
    def configured(self) -> bool:
        return bool(self.secret_key)

    async def create_payment_intent(
        self, amount: float, customer_id: str | None = None,
    ) -> str:
        """Create a payment intent for `amount` minor units. Returns the client secret."""
        if not self.configured:
            raise PaymentNotConfiguredError()

        params = {
            "amount": math.floor(amount + 0.5),
            "currency": self.currency,
            "payment_method_types": self.payment_method_types,
        }
        if customer_id:
            params["customer"] = customer_id

        try:
            intent = await asyncio.to_thread(
                stripe.PaymentIntent.create, api_key=self.secret_key, **params,
            )
        except stripe.StripeError as e:
            logger.error(
                f"Stripe payment intent failed: {e}",
                extra={"error_code": type(e).__name__},
            )
            raise PaymentProviderError(type(e).__name__)

        logger.info(f"Payment intent created for {params['amount']} {self.currency}")
        return intent.client_secret


def get_payment_gateway(request: Request) -> StripePaymentGateway:
    """FastAPI dependency: gateway attached to the app in the lifespan."""
    gateway = getattr(request.app.state, "payment_gateway", None)
    if gateway is None:
        raise PaymentNotConfiguredError()
    return gateway
