"""Tests for PaymentIntentBridge."""

from __future__ import annotations

from decimal import Decimal
from types import SimpleNamespace
from unittest.mock import Mock

import pytest
import stripe

from greencare.camps import CampCatalog
from greencare.errors import NotFoundError, ProcessorError
from greencare.payments import PaymentIntentBridge, to_minor_units


@pytest.fixture
def processor() -> Mock:
    """Stand-in for the stripe module."""
    mock_stripe = Mock()
    mock_stripe.PaymentIntent.create.return_value = SimpleNamespace(
        id="pi_123", client_secret="pi_123_secret_abc", amount=0, status="requires_payment_method"
    )
    return mock_stripe


@pytest.fixture
def bridge(store, processor) -> PaymentIntentBridge:
    return PaymentIntentBridge(CampCatalog(store), api_key="sk_test_123", currency="usd", processor=processor)


class TestToMinorUnits:
    @pytest.mark.parametrize(
        ("fee", "expected"),
        [
            (Decimal("25.00"), 2500),
            (Decimal("10"), 1000),
            (Decimal("19.99"), 1999),
            (Decimal("0"), 0),
            (Decimal("12.345"), 1234),
        ],
    )
    def test_conversion_truncates(self, fee, expected):
        assert to_minor_units(fee) == expected


class TestCreateIntent:
    @pytest.mark.asyncio
    async def test_returns_only_client_secret(self, bridge, make_camp):
        camp_id = make_camp(fees=25.0)

        secret = await bridge.create_intent(camp_id, "ana@example.com")

        assert secret == "pi_123_secret_abc"

    @pytest.mark.asyncio
    async def test_amount_is_fee_in_cents(self, bridge, processor, make_camp):
        camp_id = make_camp(fees=25.0)

        await bridge.create_intent(camp_id, "ana@example.com")

        kwargs = processor.PaymentIntent.create.call_args.kwargs
        assert kwargs["amount"] == 2500

    @pytest.mark.asyncio
    async def test_float_fee_from_store_converts_exactly(self, bridge, processor, make_camp):
        camp_id = make_camp(fees=19.99)

        await bridge.create_intent(camp_id, "ana@example.com")

        assert processor.PaymentIntent.create.call_args.kwargs["amount"] == 1999

    @pytest.mark.asyncio
    async def test_sends_currency_receipt_email_metadata_and_key(self, bridge, processor, make_camp):
        camp_id = make_camp(fees=10.0)

        await bridge.create_intent(camp_id, "ana@example.com")

        processor.PaymentIntent.create.assert_called_once_with(
            amount=1000,
            currency="usd",
            payment_method_types=["card"],
            receipt_email="ana@example.com",
            metadata={"camp_id": camp_id},
            api_key="sk_test_123",
        )

    @pytest.mark.asyncio
    async def test_unknown_camp_never_contacts_processor(self, bridge, processor):
        with pytest.raises(NotFoundError):
            await bridge.create_intent("missing-camp", "ana@example.com")

        processor.PaymentIntent.create.assert_not_called()

    @pytest.mark.asyncio
    async def test_processor_failure_is_single_attempt(self, bridge, processor, make_camp):
        camp_id = make_camp(fees=10.0)
        processor.PaymentIntent.create.side_effect = stripe.StripeError("card network down")

        with pytest.raises(ProcessorError, match="card network down"):
            await bridge.create_intent(camp_id, "ana@example.com")

        assert processor.PaymentIntent.create.call_count == 1
