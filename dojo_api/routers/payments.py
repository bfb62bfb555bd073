# dojo_api/routers/payments.py
"""Stripe payment endpoints; 503 until a secret key is configured."""
from typing import List, Optional

from fastapi import APIRouter, Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.database import get_db
from ..core.deps import get_current_user
from ..models.user import User
from ..schemas.payment_schemas import (
    PaymentIntentRequest,
    PaymentIntentResponse,
    PaymentMethod,
    SubscriptionRequest,
    SubscriptionResponse,
)
from ..services.payment_service import PaymentService
from ..services.user_service import UserService

router = APIRouter(prefix="/api", tags=["payments"])


async def get_payment_service(
    request: Request,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
) -> PaymentService:
    return PaymentService(request.app.state.payment_settings, UserService(db))


@router.post("/create-payment-intent", response_model=PaymentIntentResponse)
async def create_payment_intent(
    body: PaymentIntentRequest,
    current_user: User = Depends(get_current_user),
    service: PaymentService = Depends(get_payment_service)
):
    return await service.create_payment_intent(current_user, body.amount, body.currency)


@router.post("/create-subscription", response_model=SubscriptionResponse)
async def create_subscription(
    body: SubscriptionRequest,
    current_user: User = Depends(get_current_user),
    service: PaymentService = Depends(get_payment_service)
):
    return await service.create_subscription(current_user, body.price_id)


@router.get("/payment-methods", response_model=List[PaymentMethod])
async def get_payment_methods(
    current_user: User = Depends(get_current_user),
    service: PaymentService = Depends(get_payment_service)
):
    return await service.list_payment_methods(current_user)


@router.get("/subscription", response_model=Optional[SubscriptionResponse])
async def get_subscription(
    current_user: User = Depends(get_current_user),
    service: PaymentService = Depends(get_payment_service)
):
    return await service.get_subscription(current_user)
