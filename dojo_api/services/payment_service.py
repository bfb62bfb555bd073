# dojo_api/services/payment_service.py
"""Stripe-backed payments.

Every gateway call passes the api key and API version explicitly; no
module-level client state is configured.
"""
import logging
from typing import Any, Dict, List, Optional

import stripe
from pydantic import BaseModel
from starlette.concurrency import run_in_threadpool

from ..core.config import Settings
from ..core.exceptions import PaymentGatewayError, PaymentsNotConfigured
from ..models.user import User
from .user_service import UserService

logger = logging.getLogger(__name__)


class PaymentSettings(BaseModel):
    secret_key: Optional[str] = None
    api_version: str = '2023-10-16'

    @classmethod
    def from_settings(cls, settings: Settings) -> "PaymentSettings":
        return cls(secret_key=settings.stripe_secret_key or None, api_version=settings.stripe_api_version)

    @property
    def is_configured(self) -> bool:
        return bool(self.secret_key)


def to_minor_units(amount: float) -> int:
    """Dollars to cents"""
    return int(round(amount * 100))


class PaymentService:
    def __init__(self, payment_settings: PaymentSettings, user_service: UserService):
        if not payment_settings.is_configured:
            raise PaymentsNotConfigured()
        self.settings = payment_settings
        self.user_service = user_service

    async def _call(self, operation, *args, **params):
        """Run one blocking SDK call off the event loop"""
        try:
            return await run_in_threadpool(
                operation,
                *args,
                api_key=self.settings.secret_key,
                stripe_version=self.settings.api_version,
                **params,
            )
        except stripe.StripeError as e:
            logger.error(f"Stripe call {getattr(operation, '__qualname__', operation)} failed: {e}")
            raise PaymentGatewayError(f"Payment gateway error: {getattr(e, 'user_message', None) or str(e)}")

    async def create_payment_intent(self, user: User, amount: float, currency: str = "usd") -> Dict[str, Any]:
        intent = await self._call(
            stripe.PaymentIntent.create,
            amount=to_minor_units(amount),
            currency=currency.lower(),
            metadata={"userId": str(user.id), "username": user.username},
        )
        logger.info(f"Created payment intent {intent.id} for user {user.id}")
        return {"client_secret": intent.client_secret}

    async def get_or_create_customer(self, user: User) -> str:
        if user.stripe_customer_id:
            return user.stripe_customer_id

        customer = await self._call(
            stripe.Customer.create,
            email=user.email,
            name=user.display_name or user.username,
            metadata={"userId": str(user.id)},
        )
        await self.user_service.update(user.id, {"stripe_customer_id": customer.id})
        user.stripe_customer_id = customer.id
        logger.info(f"Created Stripe customer {customer.id} for user {user.id}")
        return customer.id

    async def create_subscription(self, user: User, price_id: str) -> Dict[str, Any]:
        customer_id = await self.get_or_create_customer(user)
        subscription = await self._call(
            stripe.Subscription.create,
            customer=customer_id,
            items=[{"price": price_id}],
            payment_behavior="default_incomplete",
            expand=["latest_invoice.payment_intent"],
        )
        await self.user_service.update(user.id, {"stripe_subscription_id": subscription.id})

        # Unexpanded references come back as id strings and carry no secret
        invoice = getattr(subscription, "latest_invoice", None)
        payment_intent = getattr(invoice, "payment_intent", None)

        return {
            "subscription_id": subscription.id,
            "client_secret": getattr(payment_intent, "client_secret", None),
            "status": getattr(subscription, "status", None),
        }

    async def list_payment_methods(self, user: User) -> List[Dict[str, Any]]:
        if not user.stripe_customer_id:
            return []

        methods = await self._call(stripe.PaymentMethod.list, customer=user.stripe_customer_id, type="card")
        result = []
        for method in methods.data:
            card = getattr(method, "card", None)
            result.append({
                "id": method.id,
                "brand": getattr(card, "brand", None),
                "last4": getattr(card, "last4", None),
                "exp_month": getattr(card, "exp_month", None),
                "exp_year": getattr(card, "exp_year", None),
            })
        return result

    async def get_subscription(self, user: User) -> Optional[Dict[str, Any]]:
        if not user.stripe_subscription_id:
            return None

        subscription = await self._call(stripe.Subscription.retrieve, user.stripe_subscription_id)
        return {
            "subscription_id": subscription.id,
            "client_secret": None,
            "status": getattr(subscription, "status", None),
        }
