"""Payment Routes: Stripe payment intents for checkout."""

from fastapi import APIRouter, Depends

from crave.infrastructure.payments import StripePaymentGateway, get_payment_gateway
from crave.schemas.payment import PaymentIntentCreate, PaymentIntentResponse

router = APIRouter(prefix="/api", tags=["payments"])


@router.post("/create-payment-intent", response_model=PaymentIntentResponse)
async def create_payment_intent(
    body: PaymentIntentCreate,
    gateway: StripePaymentGateway = Depends(get_payment_gateway),
):
    client_secret = await gateway.create_payment_intent(
        body.amount, customer_id=body.customer_id,
    )
    return PaymentIntentResponse(client_secret=client_secret)
