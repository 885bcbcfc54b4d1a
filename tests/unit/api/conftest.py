"""Fixtures for endpoint tests: the real app wired to the in-memory store."""

from __future__ import annotations

from collections.abc import Generator
from types import SimpleNamespace
from unittest.mock import Mock

import pytest
from fastapi.testclient import TestClient

from api.dependencies import get_camp_catalog, get_payment_bridge, get_store
from api.main import create_app
from greencare.payments import PaymentIntentBridge


@pytest.fixture
def processor() -> Mock:
    """Stand-in for the stripe module."""
    mock_stripe = Mock()
    mock_stripe.PaymentIntent.create.return_value = SimpleNamespace(id="pi_42", client_secret="pi_42_secret_xyz")
    return mock_stripe


@pytest.fixture
def client(store, processor) -> Generator[TestClient, None, None]:
    """TestClient without lifespan; the store comes from the fixture instead."""
    app = create_app()
    app.dependency_overrides[get_store] = lambda: store
    app.dependency_overrides[get_payment_bridge] = lambda: PaymentIntentBridge(
        get_camp_catalog(store), api_key="sk_test_123", processor=processor
    )
    yield TestClient(app)
    app.dependency_overrides.clear()
