"""FastMCP tool server exposing ``calculate_wage`` over stdio.

The server only translates between MCP and ``WageTool``: arguments in,
indented JSON text out. Unknown tool names are answered by FastMCP itself;
invalid arguments come back as a tool error.

Logging goes to stderr. stdout is the MCP transport and must carry
nothing but protocol messages.
"""

from __future__ import annotations

import logging
from typing import Annotated, Optional

from fastmcp import FastMCP
from fastmcp.exceptions import ToolError
from pydantic import Field

from wage_calculator.calculators.engine import WageCalculator
from wage_calculator.config import Settings, get_settings
from wage_calculator.errors import InvalidArgumentsError
from wage_calculator.tools import TOOL_DESCRIPTION, TOOL_NAME, WageTool

logger = logging.getLogger(__name__)

SERVER_NAME = "wage-calculator"

# Numbers only: strings and booleans are rejected, not coerced
Amount = Annotated[float, Field(strict=True, allow_inf_nan=False)]


def create_server(settings: Settings | None = None) -> FastMCP:
    """Create the MCP server with the wage tool registered."""
    settings = settings or get_settings()
    tool = WageTool(
        WageCalculator(settings.build_tables()),
        default_model=settings.calculation_model,
    )
    mcp = FastMCP(SERVER_NAME)

    @mcp.tool(name=TOOL_NAME, description=TOOL_DESCRIPTION)
    def calculate_wage(
        base_salary: Amount,
        overtime_hours: Optional[Amount] = None,
        overtime_rate: Optional[Amount] = None,
        bonus: Optional[Amount] = None,
        tax_rate: Optional[Amount] = None,
        deductions: Optional[Amount] = None,
        model: Optional[str] = None,
    ) -> str:
        """Calculate a monthly salary breakdown.

        Args:
            base_salary: Monthly basic salary in CNY, must be positive.
            overtime_hours: Monthly overtime hours (default 0).
            overtime_rate: Overtime hourly multiplier, at least 1 (default 1.5).
            bonus: Additional monthly bonus (default 0).
            tax_rate: Flat tax rate in [0, 1], flat_rate model only (default 0.2).
            deductions: Other deductions, flat_rate model only (default 0).
            model: "itemized" or "flat_rate".

        Returns:
            JSON text with basic pay, overtime pay, gross salary, personal and
            company contributions, taxable income, income tax and net salary.
        """
        supplied = {
            "base_salary": base_salary,
            "overtime_hours": overtime_hours,
            "overtime_rate": overtime_rate,
            "bonus": bonus,
            "tax_rate": tax_rate,
            "deductions": deductions,
            "model": model,
        }
        arguments = {key: value for key, value in supplied.items() if value is not None}
        try:
            return tool.call_tool(TOOL_NAME, arguments)
        except InvalidArgumentsError as exc:
            raise ToolError(str(exc)) from exc

    return mcp


def run_stdio(settings: Settings | None = None) -> None:
    """Serve MCP on stdin/stdout until the client disconnects."""
    mcp = create_server(settings)
    logger.info("Wage calculator MCP server running on stdio")
    mcp.run()
