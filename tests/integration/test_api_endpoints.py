"""API endpoint integration tests.

Tests the FastAPI endpoints for tool discovery and invocation.
"""

import json

import pytest
from httpx import AsyncClient

pytestmark = pytest.mark.asyncio


class TestHealthEndpoints:
    """Test health check endpoints."""

    async def test_health_check(self, client: AsyncClient):
        """Health endpoint should return 200."""
        response = await client.get("/health")
        assert response.status_code == 200

        data = response.json()
        assert data["status"] == "healthy"
        assert data["jurisdiction"] == "Shenzhen 2024"
        assert "timestamp" in data

    @pytest.mark.parametrize("path", ["/ready", "/live"])
    async def test_no_orchestration_endpoints(self, client: AsyncClient, path):
        """Only /health is served."""
        response = await client.get(path)
        assert response.status_code == 404


class TestToolDiscovery:
    """Test GET /api/v1/tools."""

    async def test_list_tools(self, client: AsyncClient):
        response = await client.get("/api/v1/tools")
        assert response.status_code == 200

        tools = response.json()["tools"]
        assert len(tools) == 1
        assert tools[0]["name"] == "calculate_wage"
        assert tools[0]["inputSchema"]["required"] == ["base_salary"]


class TestToolInvocation:
    """Test POST /api/v1/tools/{name}."""

    async def test_calculate_wage(self, client: AsyncClient):
        """Valid arguments return the breakdown as JSON text."""
        response = await client.post(
            "/api/v1/tools/calculate_wage",
            json={"base_salary": 10000},
        )

        assert response.status_code == 200, response.text
        content = response.json()["content"]
        assert content[0]["type"] == "text"

        data = json.loads(content[0]["text"])
        assert data["taxable_income"] == 3360.0
        assert data["individual_income_tax"] == 126.0
        assert data["net_salary"] == 8234.0

    async def test_flat_rate_model(self, client: AsyncClient):
        response = await client.post(
            "/api/v1/tools/calculate_wage",
            json={
                "base_salary": 10000,
                "overtime_hours": 10,
                "bonus": 1000,
                "tax_rate": 0.2,
                "deductions": 500,
                "model": "flat_rate",
            },
        )

        assert response.status_code == 200, response.text
        data = json.loads(response.json()["content"][0]["text"])
        assert data["net_salary"] == 9050.0

    async def test_unknown_tool_is_not_found(self, client: AsyncClient):
        response = await client.post(
            "/api/v1/tools/calculate_pension",
            json={"base_salary": 10000},
        )

        assert response.status_code == 404
        assert response.json() == {
            "detail": "Unknown tool: calculate_pension",
            "code": "NOT_FOUND",
        }

    @pytest.mark.parametrize(
        "payload",
        [
            {"base_salary": 0},
            {"base_salary": -100},
            {"base_salary": 10000, "overtime_hours": -1},
            {"base_salary": 10000, "tax_rate": 1.5},
            {"overtime_hours": 4},
            {"base_salary": "10000"},
            {"base_salary": True},
            [10000],
        ],
    )
    async def test_invalid_arguments(self, client: AsyncClient, payload):
        response = await client.post("/api/v1/tools/calculate_wage", json=payload)

        assert response.status_code == 422
        assert response.json() == {
            "detail": "Invalid wage calculation arguments",
            "code": "INVALID_ARGUMENTS",
        }

    async def test_missing_body(self, client: AsyncClient):
        response = await client.post("/api/v1/tools/calculate_wage")
        assert response.status_code == 422
        assert response.json()["code"] == "INVALID_ARGUMENTS"

    async def test_error_does_not_affect_next_request(self, client: AsyncClient):
        bad = await client.post("/api/v1/tools/calculate_wage", json={"base_salary": -1})
        assert bad.status_code == 422

        good = await client.post("/api/v1/tools/calculate_wage", json={"base_salary": 10000})
        assert good.status_code == 200

    async def test_identical_requests_identical_bodies(self, client: AsyncClient):
        payload = {"base_salary": 18888.88, "overtime_hours": 6, "bonus": 300}
        first = await client.post("/api/v1/tools/calculate_wage", json=payload)
        second = await client.post("/api/v1/tools/calculate_wage", json=payload)
        assert first.content == second.content

    async def test_very_large_salary(self, client: AsyncClient):
        """Amounts beyond the default decimal precision return 200."""
        response = await client.post(
            "/api/v1/tools/calculate_wage", json={"base_salary": 1e30}
        )
        assert response.status_code == 200

        data = json.loads(response.json()["content"][0]["text"])
        assert data["basic"] == 1e30
