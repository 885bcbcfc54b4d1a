"""Tests for application wiring: root, health and the store lifespan."""

from __future__ import annotations

from unittest.mock import AsyncMock, Mock, patch

from fastapi.testclient import TestClient

from api.dependencies import get_store
from api.main import create_app
from api.settings import Settings


def test_root(client):
    response = client.get("/")

    assert response.status_code == 200
    assert response.json() == "GreenCare Server is running..."


def test_health(client):
    assert client.get("/health").json() == {"status": "healthy", "service": "greencare-api"}


def test_requests_without_store_fail_with_500():
    app = create_app()

    # No lifespan and no override: app.state.store was never set
    response = TestClient(app).get("/camps")

    assert response.status_code == 500
    assert response.json() == {"detail": "Store handle is not available"}


class TestLifespan:
    def test_store_acquired_on_startup_and_released_on_shutdown(self):
        settings = Settings(
            _env_file=None,
            pocketbase_url="http://pb.test:8090",
            pocketbase_admin_email="admin@greencare.local",
            pocketbase_admin_password="s3cret-pass",
        )
        handle = Mock()
        handle.acquire = AsyncMock()
        handle.release = AsyncMock()

        with patch("api.main.get_settings", return_value=settings):
            with patch("api.main.StoreHandle") as mock_handle_class:
                mock_handle_class.connect.return_value = handle
                app = create_app()

                with TestClient(app):
                    assert app.state.store is handle
                    handle.acquire.assert_awaited_once_with(authenticate=True)

        mock_handle_class.connect.assert_called_once_with(
            "http://pb.test:8090", "admin@greencare.local", "s3cret-pass"
        )
        handle.release.assert_awaited_once()
        assert app.state.store is None

    def test_skip_auth_acquires_without_authenticating(self):
        settings = Settings(_env_file=None, skip_pb_auth=True)
        handle = Mock()
        handle.acquire = AsyncMock()
        handle.release = AsyncMock()

        with patch("api.main.get_settings", return_value=settings):
            with patch("api.main.StoreHandle") as mock_handle_class:
                mock_handle_class.connect.return_value = handle

                with TestClient(create_app()):
                    pass

        handle.acquire.assert_awaited_once_with(authenticate=False)


def test_unexpected_errors_become_generic_500():
    def broken_store():
        raise RuntimeError("disk on fire")

    app = create_app()
    app.dependency_overrides[get_store] = broken_store

    response = TestClient(app, raise_server_exceptions=False).get("/camps")

    assert response.status_code == 500
    assert response.json() == {"detail": "Internal server error"}
