"""
SalesDesk API — Documentation, Health & Error Body Tests
=========================================================

What:  Tests for /openapi.json, /api-docs, /health and the generic 500 body.
How:   Same ASGI client as the endpoint tests; failure paths use clients
       bound to a database without tables or one that cannot be opened.

What we test:
    ✅ Every route and schema is published
    ✅ Swagger UI is served
    ✅ Health reports 200 / 503
    ✅ Database failures never leak driver messages
"""

import pytest


class TestOpenAPI:

    @pytest.mark.asyncio
    async def test_paths_are_published(self, test_client):
        response = await test_client.get("/openapi.json")
        assert response.status_code == 200
        paths = response.json()["paths"]
        assert set(paths["/api/customers"]) == {"get", "post"}
        assert set(paths["/api/customers/{code}"]) == {"get", "put", "patch", "delete"}
        assert "get" in paths["/api/orders"]
        assert "get" in paths["/api/agents"]
        assert "get" in paths["/health"]

    @pytest.mark.asyncio
    async def test_schemas_are_published(self, test_client):
        schemas = (await test_client.get("/openapi.json")).json()["components"]["schemas"]
        for name in (
            "Customer",
            "CustomerCreate",
            "CustomerPatch",
            "CustomerSummary",
            "Order",
            "Agent",
            "ErrorResponse",
            "ValidationErrorResponse",
        ):
            assert name in schemas, name

    @pytest.mark.asyncio
    async def test_request_bodies_reference_components(self, test_client):
        paths = (await test_client.get("/openapi.json")).json()["paths"]
        post_body = paths["/api/customers"]["post"]["requestBody"]
        patch_body = paths["/api/customers/{code}"]["patch"]["requestBody"]
        assert post_body["content"]["application/json"]["schema"] == {
            "$ref": "#/components/schemas/CustomerCreate"
        }
        assert patch_body["content"]["application/json"]["schema"] == {
            "$ref": "#/components/schemas/CustomerPatch"
        }

    @pytest.mark.asyncio
    async def test_put_documents_both_success_codes(self, test_client):
        paths = (await test_client.get("/openapi.json")).json()["paths"]
        responses = paths["/api/customers/{code}"]["put"]["responses"]
        assert {"200", "201", "400"} <= set(responses)

    @pytest.mark.asyncio
    async def test_tags(self, test_client):
        doc = (await test_client.get("/openapi.json")).json()
        assert [t["name"] for t in doc["tags"]] == ["Customers", "Orders", "Agents", "Health"]
        assert doc["paths"]["/api/orders"]["get"]["tags"] == ["Orders"]

    @pytest.mark.asyncio
    async def test_swagger_ui_is_served(self, test_client):
        response = await test_client.get("/api-docs")
        assert response.status_code == 200
        assert "text/html" in response.headers["content-type"]
        assert "/openapi.json" in response.text


class TestHealth:

    @pytest.mark.asyncio
    async def test_healthy(self, test_client):
        response = await test_client.get("/health")
        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "healthy"
        assert body["database"] == "connected"

    @pytest.mark.asyncio
    async def test_unhealthy(self, unreachable_client):
        response = await unreachable_client.get("/health")
        assert response.status_code == 503
        assert response.json()["database"] == "disconnected"


class TestServerErrors:

    @pytest.mark.asyncio
    async def test_database_failure_body_is_generic(self, broken_client):
        response = await broken_client.get("/api/customers")
        assert response.status_code == 500
        assert response.json() == {"error": "Internal Server Error"}

    @pytest.mark.asyncio
    async def test_unreachable_database_is_500(self, unreachable_client):
        response = await unreachable_client.get("/api/agents")
        assert response.status_code == 500
        assert response.json() == {"error": "Internal Server Error"}

    @pytest.mark.asyncio
    async def test_failed_write_keeps_request_id(self, broken_client, sample_customer):
        response = await broken_client.post(
            "/api/customers", json=sample_customer, headers={"X-Request-ID": "req-500"}
        )
        assert response.status_code == 500
        assert response.headers["X-Request-ID"] == "req-500"

    @pytest.mark.asyncio
    async def test_unexpected_error_keeps_request_id(self, crashing_client):
        """A non-database failure still gets the generic body and the header."""
        response = await crashing_client.get("/api/customers", headers={"X-Request-ID": "req-boom"})
        assert response.status_code == 500
        assert response.json() == {"error": "Internal Server Error"}
        assert response.headers["X-Request-ID"] == "req-boom"

    @pytest.mark.asyncio
    async def test_unexpected_error_generates_request_id(self, crashing_client):
        response = await crashing_client.get("/api/customers/C00001")
        assert response.status_code == 500
        assert len(response.headers["X-Request-ID"]) == 8
