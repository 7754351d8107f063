"""Pytest fixtures for wage calculator tests."""

from __future__ import annotations

from decimal import Decimal
from types import MappingProxyType

import pytest

from wage_calculator.calculators.engine import WageCalculator
from wage_calculator.calculators.tables import DEFAULT_TABLES, WageTables
from wage_calculator.calculators.types import (
    CalculationModel,
    ContributionRate,
    TaxBracket,
)
from wage_calculator.config import Settings
from wage_calculator.tools import WageTool


@pytest.fixture
def tables() -> WageTables:
    """Default Shenzhen 2024 tables."""
    return DEFAULT_TABLES


@pytest.fixture
def zero_rate_tables() -> WageTables:
    """Tables where neither tax nor contributions take anything."""
    return WageTables(
        jurisdiction="Nowhere",
        brackets=(TaxBracket(Decimal("0"), Decimal("0"), Decimal("0")),),
        contribution_rates=MappingProxyType(
            {
                "pension": ContributionRate(Decimal("0"), Decimal("0")),
                "medical": ContributionRate(Decimal("0"), Decimal("0")),
            }
        ),
        tax_free_allowance=Decimal("0"),
    )


@pytest.fixture
def calculator(tables: WageTables) -> WageCalculator:
    """Calculator over the default tables."""
    return WageCalculator(tables)


@pytest.fixture
def tool(calculator: WageCalculator) -> WageTool:
    """The calculate_wage tool with the itemized model by default."""
    return WageTool(calculator)


@pytest.fixture
def settings() -> Settings:
    """Settings built explicitly, independent of the environment."""
    return Settings(
        engine_version="0.1.0-test",
        host="127.0.0.1",
        port=8000,
        debug=False,
        log_level="INFO",
        transport="stdio",
        calculation_model=CalculationModel.ITEMIZED,
        clamp_contribution_base=False,
    )
