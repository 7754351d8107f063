"""Wage Calculator Command Line Interface.

Provides:
- Serving the tool over MCP (stdio) or HTTP
- One-off calculations printed as JSON
- Display of the active tax and contribution tables

Usage:
    python -m wage_calculator serve --transport stdio
    python -m wage_calculator serve --transport http --port 8000
    python -m wage_calculator calculate --base-salary 10000 --overtime-hours 8
    python -m wage_calculator tables
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import replace
from typing import Any

from wage_calculator.calculators.engine import WageCalculator
from wage_calculator.calculators.types import CalculationModel
from wage_calculator.config import VALID_TRANSPORTS, Settings, configure_logging, get_settings
from wage_calculator.errors import InvalidArgumentsError
from wage_calculator.tools import TOOL_NAME, WageTool

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_INVALID_ARGUMENTS = 2


class WageCli:
    """Wage Calculator Command Line Interface."""

    def __init__(self, settings: Settings | None = None) -> None:
        self.settings = settings or get_settings()
        self.parser = self._build_parser()

    def _build_parser(self) -> argparse.ArgumentParser:
        """Build argument parser."""
        parser = argparse.ArgumentParser(
            prog="wage-calculator",
            description="Monthly salary, social insurance and income tax calculator",
        )
        subparsers = parser.add_subparsers(dest="command", help="Commands")

        # serve command
        serve = subparsers.add_parser(
            "serve",
            help="Serve the calculate_wage tool",
        )
        serve.add_argument(
            "--transport",
            choices=VALID_TRANSPORTS,
            default=self.settings.transport,
            help=f"Transport to serve on (default: {self.settings.transport})",
        )
        serve.add_argument(
            "--host",
            default=self.settings.host,
            help="HTTP bind address",
        )
        serve.add_argument(
            "--port",
            type=int,
            default=self.settings.port,
            help="HTTP port",
        )

        # calculate command
        calculate = subparsers.add_parser(
            "calculate",
            help="Calculate one salary breakdown and print it",
        )
        calculate.add_argument(
            "--base-salary",
            type=float,
            required=True,
            help="Monthly basic salary",
        )
        calculate.add_argument(
            "--overtime-hours",
            type=float,
            help="Monthly overtime hours",
        )
        calculate.add_argument(
            "--overtime-rate",
            type=float,
            help="Overtime hourly multiplier",
        )
        calculate.add_argument(
            "--bonus",
            type=float,
            help="Additional monthly bonus",
        )
        calculate.add_argument(
            "--tax-rate",
            type=float,
            help="Flat tax rate (flat_rate model)",
        )
        calculate.add_argument(
            "--deductions",
            type=float,
            help="Other deductions (flat_rate model)",
        )
        calculate.add_argument(
            "--model",
            choices=[m.value for m in CalculationModel],
            help=f"Calculation model (default: {self.settings.calculation_model.value})",
        )

        # tables command
        subparsers.add_parser(
            "tables",
            help="Show tax brackets and contribution rates",
        )

        return parser

    def run(self, args: list[str] | None = None) -> int:
        """Run CLI with given arguments."""
        parsed = self.parser.parse_args(args)

        if not parsed.command:
            self.parser.print_help()
            return EXIT_ERROR

        commands = {
            "serve": self._cmd_serve,
            "calculate": self._cmd_calculate,
            "tables": self._cmd_tables,
        }
        return commands[parsed.command](parsed)

    def _cmd_serve(self, args: argparse.Namespace) -> int:
        """Serve until interrupted."""
        settings = replace(
            self.settings,
            transport=args.transport,
            host=args.host,
            port=args.port,
        )
        configure_logging(settings.log_level)

        try:
            if settings.transport == "http":
                from wage_calculator.api.app import run_http

                run_http(settings)
            else:
                from wage_calculator.mcp_server import run_stdio

                run_stdio(settings)
        except KeyboardInterrupt:
            logger.info("Interrupted, shutting down")
        return EXIT_OK

    def _cmd_calculate(self, args: argparse.Namespace) -> int:
        """Print one breakdown."""
        arguments: dict[str, Any] = {
            "base_salary": args.base_salary,
            "overtime_hours": args.overtime_hours,
            "overtime_rate": args.overtime_rate,
            "bonus": args.bonus,
            "tax_rate": args.tax_rate,
            "deductions": args.deductions,
            "model": args.model,
        }
        arguments = {key: value for key, value in arguments.items() if value is not None}

        tool = WageTool(
            WageCalculator(self.settings.build_tables()),
            default_model=self.settings.calculation_model,
        )
        try:
            print(tool.call_tool(TOOL_NAME, arguments))
        except InvalidArgumentsError as e:
            print(f"ERROR: {e}", file=sys.stderr)
            return EXIT_INVALID_ARGUMENTS
        return EXIT_OK

    def _cmd_tables(self, args: argparse.Namespace) -> int:
        """Print the active tables."""
        tables = self.settings.build_tables()
        print(json.dumps(tables.describe(), indent=2))
        return EXIT_OK


def main() -> int:
    """CLI entry point."""
    cli = WageCli()
    return cli.run()


if __name__ == "__main__":
    sys.exit(main())
