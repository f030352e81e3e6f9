from pydantic import Field

from crave.schemas.base import CamelModel


class PaymentIntentCreate(CamelModel):
    """amount in minor currency units (cents); rounded before the Stripe call."""
    amount: float = Field(gt=0)
    customer_id: str | None = Field(None, max_length=255)


class PaymentIntentResponse(CamelModel):
    client_secret: str
