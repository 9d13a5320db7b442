"""Tests for API middleware and error formatting."""

from uuid import UUID

import pytest
from fastapi.testclient import TestClient

from inventory_api.api.dependencies import get_service
from inventory_api.domain.exceptions import StoreUnavailableError
from inventory_api.main import app


class TestRequestContextMiddleware:
    """Tests for request ID correlation middleware."""

    def test_generates_request_id_if_not_provided(self, client: TestClient) -> None:
        """Should generate request ID if not in request headers."""
        response = client.get("/health")
        assert response.status_code == 200
        assert "X-Request-ID" in response.headers
        request_id = response.headers["X-Request-ID"]
        assert str(UUID(request_id)) == request_id

    def test_uses_provided_request_id(self, client: TestClient) -> None:
        """Should use request ID from request headers."""
        custom_id = "custom-request-id-12345"
        response = client.get(
            "/health",
            headers={"X-Request-ID": custom_id},
        )
        assert response.status_code == 200
        assert response.headers["X-Request-ID"] == custom_id

    def test_request_id_in_error_body(self, client: TestClient) -> None:
        """Error bodies carry the request ID."""
        response = client.get(
            "/products/missing",
            headers={"X-Request-ID": "trace-me"},
        )
        assert response.status_code == 404
        assert response.json()["request_id"] == "trace-me"


class _FailingService:
    async def list_products(self, raw_filters):
        raise StoreUnavailableError("find_products", "password authentication failed for user x")

    async def list_categories(self):
        raise RuntimeError("boom")


@pytest.fixture
def failing_client(client: TestClient):
    """Client whose service fails on every call."""
    app.dependency_overrides[get_service] = lambda: _FailingService()
    yield client
    app.dependency_overrides.pop(get_service, None)


class TestErrorHandling:
    """Tests for error responses."""

    def test_store_failure_hides_driver_text(self, failing_client: TestClient) -> None:
        """Store failures return a generic 500 without internal details."""
        response = failing_client.get("/products")

        assert response.status_code == 500
        data = response.json()
        assert data["error_code"] == "STORE_UNAVAILABLE"
        assert "password" not in data["message"]
        assert data["details"] == []

    def test_unexpected_exception(self, failing_client: TestClient) -> None:
        """Unhandled exceptions become INTERNAL_ERROR."""
        response = failing_client.get("/categories")

        assert response.status_code == 500
        assert response.json()["error_code"] == "INTERNAL_ERROR"

    def test_internal_error_carries_request_id(self, failing_client: TestClient) -> None:
        """The generic 500 body and header keep the caller's request ID."""
        response = failing_client.get("/categories", headers={"X-Request-ID": "trace-500"})

        assert response.status_code == 500
        data = response.json()
        assert data["message"] == "An internal error occurred"
        assert data["details"] == []
        assert data["request_id"] == "trace-500"
        assert response.headers["X-Request-ID"] == "trace-500"
        assert "boom" not in response.text

    def test_unknown_route(self, client: TestClient) -> None:
        """Unknown routes use the standard error format."""
        response = client.get("/nope")

        assert response.status_code == 404
        data = response.json()
        assert data["error_code"] == "ERROR"
        assert "request_id" in data
