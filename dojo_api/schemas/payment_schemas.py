# dojo_api/schemas/payment_schemas.py
from typing import Optional

from pydantic import Field

from .base import DojoSchema, RequestSchema


class PaymentIntentRequest(RequestSchema):
    amount: float = Field(..., gt=0, description="Amount in major currency units, e.g. dollars")
    currency: str = Field(default="usd", min_length=3, max_length=3)


class PaymentIntentResponse(DojoSchema):
    client_secret: str


class SubscriptionRequest(RequestSchema):
    price_id: str = Field(..., min_length=1)


class SubscriptionResponse(DojoSchema):
    subscription_id: str
    client_secret: Optional[str] = None
    status: Optional[str] = None


class PaymentMethod(DojoSchema):
    id: str
    brand: Optional[str] = None
    last4: Optional[str] = None
    exp_month: Optional[int] = None
    exp_year: Optional[int] = None
