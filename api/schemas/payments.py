"""
Pydantic schemas for the payment intent endpoint.
"""

from __future__ import annotations

from pydantic import EmailStr, Field

from .base import CamelModel


class PaymentIntentRequest(CamelModel):
    """Request body for POST /create-payment-intent."""

    camp_id: str = Field(min_length=1)
    email: EmailStr


class PaymentIntentResponse(CamelModel):
    """Only the client secret is exposed, never the full Stripe object."""

    client_secret: str
