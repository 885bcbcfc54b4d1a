"""
Root test configuration and fixtures for GreenCare.

This conftest.py provides common fixtures for all test categories:
- unit/: Fast, isolated tests against an in-memory PocketBase double
- unit/api/: Endpoint tests through FastAPI's TestClient

Note: sys.path manipulation is handled here to ensure imports work correctly.
"""

from __future__ import annotations

import asyncio
import os
import sys
from decimal import Decimal
from pathlib import Path
from unittest.mock import Mock, patch

import pytest

# Add project root to path to allow imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))
sys.path.insert(0, str(Path(__file__).parent))

from greencare.store import CAMPS, StoreHandle  # noqa: E402
from fixtures.fake_pocketbase import FakePocketBase  # noqa: E402


def create_mock_pocketbase():
    """Create a Mock-based PocketBase instance for call-shape assertions."""
    mock_pb = Mock()

    mock_collection = Mock()
    mock_collection.auth_with_password = Mock(return_value=True)

    mock_list_response = Mock()
    mock_list_response.items = []
    mock_list_response.total_items = 0
    mock_list_response.total_pages = 1
    mock_list_response.page = 1
    mock_list_response.per_page = 30

    mock_collection.get_full_list = Mock(return_value=[])
    mock_collection.get_list = Mock(return_value=mock_list_response)
    mock_collection.get_one = Mock()
    mock_collection.create = Mock(return_value=Mock(id="mock-id"))
    mock_collection.update = Mock()
    mock_collection.delete = Mock(return_value=True)

    # Make collection callable to return itself for chaining
    mock_pb.collection = Mock(return_value=mock_collection)

    mock_pb.auth_store = Mock()
    mock_pb.auth_store.base_token = "mock-token"

    return mock_pb


@pytest.fixture
def mock_pocketbase():
    """Create a mock PocketBase instance for tests that need it."""
    return create_mock_pocketbase()


@pytest.fixture(autouse=True)
def mock_all_external_services():
    """Automatically mock PocketBase construction to prevent real connections.

    Set SKIP_MOCKING=true to run against real services.
    """
    if os.environ.get("SKIP_MOCKING") == "true":
        yield {}
        return

    mock_pb = create_mock_pocketbase()

    with patch("greencare.store.PocketBase") as mock_pb_class:
        mock_pb_class.return_value = mock_pb
        yield {"pocketbase": mock_pb}


@pytest.fixture
def fake_pb() -> FakePocketBase:
    """In-memory PocketBase with `participant_count` floored at 0 like the real schema."""
    pb = FakePocketBase()
    pb.collection(CAMPS).min_values["participant_count"] = 0
    return pb


@pytest.fixture
def store(fake_pb: FakePocketBase) -> StoreHandle:
    """Acquired store handle over the in-memory PocketBase."""
    handle = StoreHandle(fake_pb, "admin@greencare.local", "test-password")
    # Private loop: leaves the current event loop (and pytest-asyncio's) untouched
    loop = asyncio.new_event_loop()
    try:
        loop.run_until_complete(handle.acquire())
    finally:
        loop.close()
    return handle


@pytest.fixture
def make_camp(fake_pb: FakePocketBase):
    """Insert a camp directly into the fake store and return its id."""

    def _make_camp(name: str = "Riverside Health Camp", fees: float = 10.0, count: int = 0, **extra) -> str:
        record = fake_pb.collection(CAMPS).create(
            {"camp_name": name, "camp_fees": fees, "participant_count": count, **extra}
        )
        return record.id

    return _make_camp


@pytest.fixture
def sample_camp_data():
    """Sample camp payload as sent by the dashboard."""
    return {
        "campName": "Riverside Health Camp",
        "campFees": 25.0,
        "location": "Riverside Park",
        "dateTime": "2026-07-12T09:00",
        "healthcareProfessional": "Dr. Amina Rahman",
        "description": "Free screenings and vaccinations",
    }


@pytest.fixture
def sample_fee() -> Decimal:
    return Decimal("25.00")
