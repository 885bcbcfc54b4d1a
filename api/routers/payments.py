"""
Payments Router - Stripe payment intents for camp fees.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends

from greencare.payments import PaymentIntentBridge

from ..dependencies import get_payment_bridge
from ..schemas import PaymentIntentRequest, PaymentIntentResponse

router = APIRouter(tags=["payments"])


@router.post("/create-payment-intent", response_model=PaymentIntentResponse)
async def create_payment_intent(
    request: PaymentIntentRequest,
    bridge: Annotated[PaymentIntentBridge, Depends(get_payment_bridge)],
) -> PaymentIntentResponse:
    """Create a payment intent for a camp's fee and return its client secret."""
    client_secret = await bridge.create_intent(request.camp_id, request.email)
    return PaymentIntentResponse(client_secret=client_secret)
