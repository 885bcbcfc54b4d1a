"""
Payment intent bridge - Stripe adapter for camp fees.

Resolves the camp, converts its fee to the smallest currency unit and asks
Stripe for a PaymentIntent. Only the client secret leaves this module; the
full Stripe object is never returned to callers.

The API key is passed per request rather than through `stripe.api_key`, so
nothing here depends on process-wide Stripe state.
"""

from __future__ import annotations

import asyncio
import logging
from decimal import Decimal
from types import ModuleType
from typing import Any

import stripe

from .camps import CampCatalog
from .errors import ProcessorError
from .logging_config import TRACE

logger = logging.getLogger(__name__)

# Two-decimal currencies only (usd, eur, ...)
MINOR_UNITS_PER_MAJOR = 100


def to_minor_units(amount: Decimal) -> int:
    """Convert a fee in major units to an integer count of minor units, truncating."""
    return int(amount * MINOR_UNITS_PER_MAJOR)


class PaymentIntentBridge:
    """Stateless request/response adapter between camps and Stripe."""

    def __init__(
        self,
        camps: CampCatalog,
        api_key: str,
        currency: str = "usd",
        processor: ModuleType | Any = stripe,
    ) -> None:
        self.camps = camps
        self.api_key = api_key
        self.currency = currency
        self._stripe = processor

    async def create_intent(self, camp_id: str, email: str) -> str:
        """Create a PaymentIntent for the camp's fee and return its client secret.

        Raises:
            NotFoundError: if the camp does not exist (Stripe is not contacted)
            ProcessorError: if Stripe rejects or fails the request
        """
        camp = await self.camps.get(camp_id)
        amount = to_minor_units(camp.camp_fees)

        logger.info(f"Creating payment intent for camp {camp_id}: amount={amount} {self.currency}")
        logger.log(TRACE, f"PaymentIntent params: receipt_email={email}, metadata.camp_id={camp_id}")

        try:
            intent = await asyncio.to_thread(
                self._stripe.PaymentIntent.create,
                amount=amount,
                currency=self.currency,
                payment_method_types=["card"],
                receipt_email=email,
                metadata={"camp_id": camp_id},
                api_key=self.api_key,
            )
        except stripe.StripeError as e:
            logger.error(f"Payment intent failed for camp {camp_id}: {type(e).__name__}: {e}")
            raise ProcessorError(f"Payment processor error: {getattr(e, 'user_message', None) or e}") from e

        return intent.client_secret
