"""MCP server integration tests.

Drives the FastMCP server through an in-memory client session.
"""

import json

import pytest
from fastmcp import Client, FastMCP
from fastmcp.exceptions import ToolError

pytestmark = pytest.mark.asyncio


class TestToolListing:
    """Test tool discovery over MCP."""

    async def test_lists_single_tool(self, mcp_server: FastMCP):
        """Exactly one tool named calculate_wage."""
        async with Client(mcp_server) as client:
            tools = await client.list_tools()

        assert [t.name for t in tools] == ["calculate_wage"]
        assert "income tax" in tools[0].description

    async def test_base_salary_is_required(self, mcp_server: FastMCP):
        """Input schema requires base_salary."""
        async with Client(mcp_server) as client:
            tools = await client.list_tools()

        schema = tools[0].inputSchema
        assert "base_salary" in schema["properties"]
        assert schema["required"] == ["base_salary"]


class TestToolCall:
    """Test tool invocation over MCP."""

    async def test_itemized_breakdown(self, mcp_server: FastMCP):
        """Returns the indented JSON breakdown as text."""
        async with Client(mcp_server) as client:
            result = await client.call_tool("calculate_wage", {"base_salary": 10000})

        text = result.content[0].text
        data = json.loads(text)
        assert data["net_salary"] == 8234.0
        assert data["individual_income_tax"] == 126.0
        assert "\n  " in text

    async def test_flat_rate_model(self, mcp_server: FastMCP):
        """Model argument switches to the flat-rate computation."""
        async with Client(mcp_server) as client:
            result = await client.call_tool(
                "calculate_wage",
                {
                    "base_salary": 10000,
                    "overtime_hours": 10,
                    "bonus": 1000,
                    "tax_rate": 0.2,
                    "deductions": 500,
                    "model": "flat_rate",
                },
            )

        data = json.loads(result.content[0].text)
        assert data["model"] == "flat_rate"
        assert data["net_salary"] == 9050.0

    async def test_invalid_arguments_raise_tool_error(self, mcp_server: FastMCP):
        """Out-of-range values surface as a tool error."""
        async with Client(mcp_server) as client:
            with pytest.raises(ToolError):
                await client.call_tool(
                    "calculate_wage",
                    {"base_salary": 10000, "overtime_rate": 0.5},
                )

    @pytest.mark.parametrize(
        "arguments",
        [
            {"base_salary": "10000"},
            {"base_salary": True},
            {"base_salary": 10000, "bonus": "500"},
        ],
    )
    async def test_mistyped_arguments_raise_tool_error(
        self, mcp_server: FastMCP, arguments: dict
    ):
        """Strings and booleans are not accepted as numbers."""
        async with Client(mcp_server) as client:
            with pytest.raises(ToolError):
                await client.call_tool("calculate_wage", arguments)

    async def test_very_large_salary(self, mcp_server: FastMCP):
        """Amounts beyond the default decimal precision still render."""
        async with Client(mcp_server) as client:
            result = await client.call_tool("calculate_wage", {"base_salary": 1e30})

        data = json.loads(result.content[0].text)
        assert data["basic"] == 1e30

    async def test_unknown_tool(self, mcp_server: FastMCP):
        """Calling a tool that does not exist fails."""
        async with Client(mcp_server) as client:
            with pytest.raises(Exception, match="(?i)unknown tool|not found"):
                await client.call_tool("get_weather", {})
