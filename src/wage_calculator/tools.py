"""Tool descriptor, dispatch and result serialization.

This is the seam between the calculation core and the transports. Both the
MCP server and the HTTP API go through ``WageTool`` so they report the same
errors and the same text.
"""

from __future__ import annotations

import json
import logging
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Any

from wage_calculator.calculators.engine import WageCalculator
from wage_calculator.calculators.types import CalculationModel, WageCalculationResult
from wage_calculator.calculators.validation import parse_wage_request
from wage_calculator.errors import UnknownOperationError

logger = logging.getLogger(__name__)

TOOL_NAME = "calculate_wage"

TOOL_DESCRIPTION = (
    "Calculate comprehensive Chinese employee salary including social "
    "insurance, housing fund, and progressive income tax"
)

INPUT_SCHEMA: dict[str, Any] = {
    "type": "object",
    "properties": {
        "base_salary": {
            "type": "number",
            "description": "Monthly basic salary in CNY",
            "exclusiveMinimum": 0,
        },
        "overtime_hours": {
            "type": "number",
            "description": "Monthly overtime hours (default: 0)",
            "minimum": 0,
            "default": 0,
        },
        "overtime_rate": {
            "type": "number",
            "description": "Overtime hourly multiplier (default: 1.5)",
            "minimum": 1,
            "default": 1.5,
        },
        "bonus": {
            "type": "number",
            "description": "Additional monthly bonus (default: 0)",
            "minimum": 0,
            "default": 0,
        },
        "tax_rate": {
            "type": "number",
            "description": "Flat tax rate, flat_rate model only (default: 0.2)",
            "minimum": 0,
            "maximum": 1,
            "default": 0.2,
        },
        "deductions": {
            "type": "number",
            "description": "Other deductions, flat_rate model only (default: 0)",
            "minimum": 0,
            "default": 0,
        },
        "model": {
            "type": "string",
            "description": (
                "itemized: contributions, 5000 allowance and progressive tax; "
                "flat_rate: single tax rate on gross"
            ),
            "enum": [m.value for m in CalculationModel],
        },
    },
    "required": ["base_salary"],
}

OUTPUT_PRECISION = Decimal("0.01")


def round_cents(value: Decimal) -> Decimal:
    """Round half-up to cents, with enough precision for any magnitude."""
    with localcontext() as ctx:
        # quantize needs every integer digit plus two decimals
        ctx.prec = max(ctx.prec, value.adjusted() + 3)
        return value.quantize(OUTPUT_PRECISION, rounding=ROUND_HALF_UP)


def _present(value: Any) -> Any:
    """Round Decimals to cents for display; recurse into dicts."""
    if isinstance(value, Decimal):
        return float(round_cents(value))
    if isinstance(value, dict):
        return {key: _present(item) for key, item in value.items()}
    return value


def serialize_result(result: WageCalculationResult) -> dict[str, Any]:
    """JSON-ready breakdown with amounts rounded to two places."""
    data = _present(result.to_dict())
    # Rates keep their precision
    if result.marginal_rate is not None:
        data["marginal_rate"] = float(result.marginal_rate)
    if result.tax_rate is not None:
        data["tax_rate"] = float(result.tax_rate)
    return data


def render_result(result: WageCalculationResult) -> str:
    """Human-readable JSON text of a breakdown."""
    return json.dumps(serialize_result(result), indent=2, ensure_ascii=False)


class WageTool:
    """The single ``calculate_wage`` tool.

    Usage:
        tool = WageTool(WageCalculator())
        tool.list_tools()
        tool.call_tool("calculate_wage", {"base_salary": 10000})
    """

    def __init__(
        self,
        calculator: WageCalculator,
        default_model: CalculationModel = CalculationModel.ITEMIZED,
    ):
        self.calculator = calculator
        self.default_model = default_model

    def list_tools(self) -> list[dict[str, Any]]:
        """Tool descriptors for discovery."""
        return [
            {
                "name": TOOL_NAME,
                "description": TOOL_DESCRIPTION,
                "inputSchema": INPUT_SCHEMA,
            }
        ]

    def calculate(self, arguments: Any) -> WageCalculationResult:
        """Validate arguments and compute.

        Raises:
            InvalidArgumentsError: If the arguments do not validate.
        """
        request = parse_wage_request(
            arguments,
            tables=self.calculator.tables,
            default_model=self.default_model,
        )
        return self.calculator.compute(request)

    def call_tool(self, name: str, arguments: Any) -> str:
        """Invoke a tool by name and return its text output.

        Raises:
            UnknownOperationError: If ``name`` is not ``calculate_wage``.
            InvalidArgumentsError: If the arguments do not validate.
        """
        if name != TOOL_NAME:
            logger.warning("Unknown tool requested: %s", name)
            raise UnknownOperationError(name)

        logger.info("%s called", name)
        return render_result(self.calculate(arguments))
