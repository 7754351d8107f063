"""Wage calculation engine."""

from wage_calculator.calculators.contributions import ContributionCalculator
from wage_calculator.calculators.engine import WageCalculator, calculate_wage
from wage_calculator.calculators.tables import DEFAULT_TABLES, WageTables
from wage_calculator.calculators.tax_calculator import TaxCalculator
from wage_calculator.calculators.types import (
    CalculationModel,
    WageCalculationRequest,
    WageCalculationResult,
)
from wage_calculator.calculators.validation import parse_wage_request

__all__ = [
    "CalculationModel",
    "ContributionCalculator",
    "DEFAULT_TABLES",
    "TaxCalculator",
    "WageCalculationRequest",
    "WageCalculationResult",
    "WageCalculator",
    "WageTables",
    "calculate_wage",
    "parse_wage_request",
]
