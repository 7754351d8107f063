"""Integration test fixtures for the HTTP and MCP transports."""

from collections.abc import AsyncGenerator

import pytest
import pytest_asyncio
from fastmcp import FastMCP
from httpx import ASGITransport, AsyncClient

from wage_calculator.api.app import create_app
from wage_calculator.config import Settings
from wage_calculator.mcp_server import create_server


@pytest_asyncio.fixture
async def client(settings: Settings) -> AsyncGenerator[AsyncClient, None]:
    """HTTP client bound to an in-process app."""
    app = create_app(settings)
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac


@pytest.fixture
def mcp_server(settings: Settings) -> FastMCP:
    """MCP server for in-memory client sessions."""
    return create_server(settings)
