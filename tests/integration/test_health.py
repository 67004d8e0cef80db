"""Integration tests for the HTTP application.

Uses the real FastAPI app through ASGITransport.
"""

from httpx import AsyncClient

from src.models.schemas import HealthResponse


class TestHealthEndpoint:
    """Tests for GET /health."""

    async def test_health_returns_ok(self, async_client: AsyncClient) -> None:
        response = await async_client.get("/health")

        assert response.status_code == 200
        assert HealthResponse.model_validate(response.json()) == HealthResponse()

    async def test_wrong_http_method_returns_405(self, async_client: AsyncClient) -> None:
        response = await async_client.post("/health")

        assert response.status_code == 405

    async def test_cors_headers_present(self, async_client: AsyncClient) -> None:
        response = await async_client.get("/health", headers={"Origin": "http://localhost:3000"})

        assert "access-control-allow-origin" in response.headers
