"""
Integration tests for OpenAPI documentation and health check.

Verifies OpenAPI schema is correctly generated for all endpoints.
"""

from pathlib import Path

import httpx
import pytest
from fastapi.testclient import TestClient

from regform.adapters.http.remote import HttpRegistrantStore
from regform.adapters.storage.local import JsonFileRegistrantStore
from regform.api.main import app


@pytest.fixture
def client() -> TestClient:
    """Create test client for the application."""
    return TestClient(app)


class TestOpenAPISchema:
    """Tests for OpenAPI schema generation."""

    def test_openapi_schema_accessible(self, client: TestClient) -> None:
        response = client.get("/openapi.json")
        assert response.status_code == 200
        schema = response.json()
        assert "openapi" in schema
        assert "info" in schema
        assert "paths" in schema

    def test_openapi_title_and_version(self, client: TestClient) -> None:
        schema = client.get("/openapi.json").json()
        assert schema["info"]["title"] == "regform"
        assert schema["info"]["version"] == "0.1.0"

    def test_registrant_endpoints_in_schema(self, client: TestClient) -> None:
        paths = client.get("/openapi.json").json()["paths"]
        assert "get" in paths["/v1/registrants"]
        assert "post" in paths["/v1/registrants"]
        assert "post" in paths["/v1/validations"]

    def test_register_documents_error_responses(self, client: TestClient) -> None:
        responses = client.get("/openapi.json").json()["paths"]["/v1/registrants"]["post"][
            "responses"
        ]
        for code in ("201", "409", "422", "502", "503"):
            assert code in responses

    def test_request_schema_uses_wire_names(self, client: TestClient) -> None:
        schemas = client.get("/openapi.json").json()["components"]["schemas"]
        properties = schemas["RegistrationRequest"]["properties"]
        assert {"firstName", "lastName", "email", "birthDate", "city", "postalCode"} <= set(
            properties
        )


class TestHealthCheck:
    """Tests for GET /health."""

    def test_health(self, client: TestClient) -> None:
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_reports_local_store_in_use(
        self, client: TestClient, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setattr(
            app.state, "store", JsonFileRegistrantStore(tmp_path / "r.json"), raising=False
        )

        assert client.get("/health").json() == {"status": "healthy", "storage": "local"}

    def test_reports_remote_store_in_use(
        self, client: TestClient, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """The reported backend follows the store, not the settings."""
        http_client = httpx.Client(
            base_url="https://api.test",
            transport=httpx.MockTransport(lambda request: httpx.Response(200, json=[])),
        )
        store = HttpRegistrantStore("https://api.test", client=http_client)
        monkeypatch.setattr(app.state, "store", store, raising=False)

        try:
            assert client.get("/health").json() == {"status": "healthy", "storage": "remote"}
        finally:
            store.close()
