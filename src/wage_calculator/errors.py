"""Wage calculator exception hierarchy."""

from __future__ import annotations

from typing import Any


class WageCalculatorError(Exception):
    """Base exception for all wage calculator errors."""


class InvalidArgumentsError(WageCalculatorError):
    """Tool arguments are malformed, missing, or out of range.

    The message is deliberately generic; ``errors`` keeps the underlying
    validation details for logging.
    """

    def __init__(
        self,
        message: str = "Invalid wage calculation arguments",
        errors: list[dict[str, Any]] | None = None,
    ) -> None:
        self.errors = errors or []
        super().__init__(message)


class UnknownOperationError(WageCalculatorError):
    """Request names a tool this server does not provide."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Unknown tool: {name}")
